"""
入力文字列から permalink を決定する
"""

from __future__ import annotations

import logging

import httpx

from .api_client import search_researchers
from .common import is_permalink
from .config import SEARCH_COUNT
from .exceptions import NotFound
from .models import ResearcherSearchPage

logger = logging.getLogger(__name__)


async def resolve_permalink(client: httpx.AsyncClient, query: str) -> str:
    """
    permalink 形式の入力はそのまま使い、それ以外は研究者検索の先頭の結果を使う。

    query は空でないこと（空白のみの入力は呼び出し側で弾く）。

    Raises:
        FetchFailure: 検索 API が 2xx 以外を返した
        NotFound: 検索結果が 0 件
    """
    if is_permalink(query):
        return query

    data = await search_researchers(client, query, count=SEARCH_COUNT)
    page = ResearcherSearchPage.model_validate(data)
    logger.info("Search results for %r: %d items", query, len(page.items))

    if not page.items:
        raise NotFound(query)

    return page.items[0].resolved_permalink()
