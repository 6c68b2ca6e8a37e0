"""
rm_publist 設定

researchmap API・外部リンクの URL と、表示に使う固定文言をまとめる。
"""

# researchmap API 設定
RESEARCHMAP_API_BASE = "https://api.researchmap.jp"
RESEARCHMAP_WEB_BASE = "https://researchmap.jp"
PUBLISHED_PAPERS = "published_papers"

# 全リクエスト共通のヘッダー
ACCEPT_HEADERS = {"Accept": "application/json"}
REQUEST_TIMEOUT = 30.0

# 取得件数
DEFAULT_LIST_LIMIT = 1000    # 論文リスト直接表示
DEFAULT_SEARCH_LIMIT = 100   # 検索画面
SEARCH_COUNT = 10            # 研究者検索で取得する候補数

# 外部リンク
PROFILE_URL_TEMPLATE = RESEARCHMAP_WEB_BASE + "/{permalink}"
PUBLICATIONS_URL_TEMPLATE = RESEARCHMAP_WEB_BASE + "/{permalink}/" + PUBLISHED_PAPERS + "?limit=100"
DOI_URL_TEMPLATE = "https://doi.org/{doi}"

# プレースホルダー
UNKNOWN_NAME = "Unknown Name"
UNKNOWN_AFFILIATION = "Unknown Affiliation"
NO_TITLE = "[No title available]"

# 画面メッセージ
LOADING_PUBLICATIONS = "Loading publications..."
SEARCHING = "Searching..."
EMPTY_QUERY = "Please enter a researcher name or ID."
NO_RESEARCHERS = "No researchers found matching your query."
NO_PUBLICATIONS_MATCHING = "No publications found matching the criteria."
NO_PUBLICATIONS_FOR_RESEARCHER = "No publications found for this researcher."
