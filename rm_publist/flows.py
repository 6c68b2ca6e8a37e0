"""
論文リスト表示の2つの流れ

- publist: permalink が分かっている場合、論文リストを直接描画する
- search_researcher: 検索語 → permalink → プロフィール → 論文リスト の順に取得して描画する

どちらも描画先の Container を引数で受け取り、それ以外には書き込まない。
取得・解析の失敗は各関数の先頭でまとめて捕まえ、描画先にメッセージとして表示する。
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from .api_client import fetch_profile, fetch_published_papers
from .config import (
    DEFAULT_LIST_LIMIT,
    DEFAULT_SEARCH_LIMIT,
    EMPTY_QUERY,
    LOADING_PUBLICATIONS,
    NO_PUBLICATIONS_FOR_RESEARCHER,
    NO_PUBLICATIONS_MATCHING,
    NO_RESEARCHERS,
    SEARCHING,
)
from .exceptions import NotFound, RmPublistError
from .models import (
    Container,
    Profile,
    PublicationPage,
    PublicationQuery,
    PublistOptions,
    PublistResult,
)
from .render import (
    render_list_error,
    render_list_message,
    render_message,
    render_profile,
    render_profile_error,
    render_publication_list,
)
from .resolver import resolve_permalink

logger = logging.getLogger(__name__)

# ValueError は JSON の解析失敗と pydantic.ValidationError を含む
FLOW_ERRORS = (RmPublistError, httpx.HTTPError, ValueError)

DIRECT_LIST_OPTIONS = PublistOptions(empty_message=NO_PUBLICATIONS_MATCHING, show_summary=False)
SEARCH_LIST_OPTIONS = PublistOptions(empty_message=NO_PUBLICATIONS_FOR_RESEARCHER, show_summary=True)


async def _load_publications(
    client: httpx.AsyncClient,
    container: Container,
    permalink: str,
    query: PublicationQuery,
    options: PublistOptions,
) -> PublistResult:
    container.replace(render_list_message(LOADING_PUBLICATIONS))

    data = await fetch_published_papers(client, permalink, query)
    page = PublicationPage.model_validate(data)
    result = render_publication_list(page, options)

    container.replace(result.html, result.summary_html)
    logger.info("Displayed %d out of %d items.", result.displayed, result.total)
    return result


async def publist(
    client: httpx.AsyncClient,
    container: Container,
    permalink: str,
    limit: Optional[int] = DEFAULT_LIST_LIMIT,
    from_date: str = "",
    to_date: str = "",
) -> Optional[PublistResult]:
    """
    permalink の論文リストを container に描画する。

    Args:
        client: researchmap API 用クライアント
        container: 描画先の <ul>
        permalink: 研究者の permalink
        limit: 最大取得件数
        from_date: 出版日の開始（例: 2016 / 2016-01-01）
        to_date: 出版日の終了（例: 2016-01-01）

    Returns:
        描画結果。失敗した場合は None（container にはエラーを表示）
    """
    try:
        query = PublicationQuery(limit=limit or None, from_date=from_date, to_date=to_date)
        return await _load_publications(client, container, permalink, query, DIRECT_LIST_OPTIONS)
    except FLOW_ERRORS as e:
        logger.error("Error loading publications for %s: %s", permalink, e)
        container.replace(render_list_error(e))
        return None


async def search_researcher(
    client: httpx.AsyncClient,
    query: str,
    profile_container: Container,
    publist_container: Container,
    limit: Optional[int] = DEFAULT_SEARCH_LIMIT,
) -> Optional[PublistResult]:
    """
    検索語から研究者を特定し、プロフィールと論文リストを描画する。

    検索・プロフィール取得のどこかで失敗した場合、論文リストは空のまま取得しない。
    """
    query = (query or "").strip()
    if not query:
        profile_container.replace(render_message(EMPTY_QUERY))
        return None

    profile_container.replace(render_message(SEARCHING))
    publist_container.replace("")

    try:
        permalink = await resolve_permalink(client, query)
        profile = Profile.model_validate(await fetch_profile(client, permalink))
    except NotFound:
        logger.info("No researchers found for %r", query)
        profile_container.replace(render_message(NO_RESEARCHERS))
        return None
    except FLOW_ERRORS as e:
        logger.error("Error resolving researcher %r: %s", query, e)
        profile_container.replace(render_profile_error(e))
        return None

    profile_container.replace(render_profile(profile, permalink))

    try:
        list_query = PublicationQuery(limit=limit or None)
        return await _load_publications(client, publist_container, permalink, list_query, SEARCH_LIST_OPTIONS)
    except FLOW_ERRORS as e:
        logger.error("Error fetching publications for %s: %s", permalink, e)
        publist_container.replace(render_list_error(e))
        return None
