"""
例外定義

- FetchFailure: researchmap API が 2xx 以外を返した
- NotFound: 研究者検索の結果が 0 件

論文 0 件はエラーではなく、プレースホルダー表示で終わる正常系として扱う。
"""

from __future__ import annotations


class RmPublistError(Exception):
    """rm_publist の例外の基底クラス"""


class FetchFailure(RmPublistError):
    """HTTP ステータスが成功以外"""

    def __init__(self, status_code: int, message: str | None = None):
        self.status_code = status_code
        self.message = message or f"API returned status {status_code}"
        super().__init__(self.message)


class NotFound(RmPublistError):
    """検索クエリに一致する研究者がいない"""

    def __init__(self, query: str):
        self.query = query
        super().__init__(f"No researchers found for {query!r}")
