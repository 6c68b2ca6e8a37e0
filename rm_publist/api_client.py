"""
api_client.py — researchmap API クライアント

研究者検索・プロフィール・論文リストの3種類のエンドポイントを取得する。
2xx 以外は FetchFailure として呼び出し側へ送出する（リトライはしない）。
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from .config import (
    ACCEPT_HEADERS,
    PUBLISHED_PAPERS,
    REQUEST_TIMEOUT,
    RESEARCHMAP_API_BASE,
    SEARCH_COUNT,
)
from .exceptions import FetchFailure
from .models import PublicationQuery

logger = logging.getLogger(__name__)


def create_client() -> httpx.AsyncClient:
    """researchmap API 用のクライアントを作成（ヘッダー・タイムアウトはリクエストごとに指定）"""
    return httpx.AsyncClient()


async def fetch_endpoint(
    client: httpx.AsyncClient,
    rm_id: str,
    endpoint: str = "",
    params: Optional[Dict[str, Any]] = None,
    error_message: Optional[str] = None,
) -> dict:
    """researchmap APIから単一のエンドポイントデータを取得

    error_message は "{status}" を含む書式文字列。省略時は
    "API returned status {status}"。
    """
    url = f"{RESEARCHMAP_API_BASE}/{rm_id}"
    if endpoint:
        url += f"/{endpoint}"

    logger.info("Fetching from URL: %s (params=%s)", url, params or {})
    response = await client.get(url, params=params, headers=ACCEPT_HEADERS, timeout=REQUEST_TIMEOUT)
    logger.info("Status: %s; %s", response.status_code, response.url)

    if not response.is_success:
        logger.warning("Failed to fetch %s for %s: %s", endpoint or "profile", rm_id, response.status_code)
        message = error_message.format(status=response.status_code) if error_message else None
        raise FetchFailure(response.status_code, message)

    return response.json()


async def search_researchers(client: httpx.AsyncClient, name: str, count: int = SEARCH_COUNT) -> dict:
    """名前で研究者を検索（GET /researchers?name=&count=）"""
    return await fetch_endpoint(client, "researchers", params={"name": name, "count": count})


async def fetch_profile(client: httpx.AsyncClient, permalink: str) -> dict:
    """研究者プロフィールを取得"""
    return await fetch_endpoint(
        client,
        permalink,
        error_message="Researcher profile not found ({status})",
    )


async def fetch_published_papers(
    client: httpx.AsyncClient,
    permalink: str,
    query: Optional[PublicationQuery] = None,
) -> dict:
    """論文リストを取得（指定された条件だけを送る）"""
    params = query.to_params() if query is not None else {}
    return await fetch_endpoint(client, permalink, PUBLISHED_PAPERS, params=params)
