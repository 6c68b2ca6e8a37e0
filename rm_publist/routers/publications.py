"""
論文リスト・研究者検索APIエンドポイント

どちらも描画済みの HTML 断片を、描画先の要素 ID ごとに返す。
"""

from typing import AsyncIterator

import httpx
from fastapi import APIRouter, Depends, Query

from .. import flows
from ..api_client import create_client
from ..config import DEFAULT_LIST_LIMIT, DEFAULT_SEARCH_LIMIT
from ..models import Container, FlowResponse

router = APIRouter()


async def get_client() -> AsyncIterator[httpx.AsyncClient]:
    """リクエストごとの researchmap API クライアント"""
    async with create_client() as client:
        yield client


@router.get("/publist/{permalink}", response_model=FlowResponse)
async def get_publist(
    permalink: str,
    ulid: str = Query("publist", description="描画先 <ul> の ID"),
    limit: int = Query(DEFAULT_LIST_LIMIT, ge=1, description="最大取得件数"),
    from_date: str = Query("", description="出版日の開始（例: 2016 / 2016-01-01）"),
    to_date: str = Query("", description="出版日の終了（例: 2016-01-01）"),
    client: httpx.AsyncClient = Depends(get_client),
):
    """
    permalink の論文リストを取得
    """
    container = Container(element_id=ulid)
    await flows.publist(client, container, permalink, limit=limit, from_date=from_date, to_date=to_date)
    return FlowResponse(containers=[container])


@router.get("/search", response_model=FlowResponse)
async def search(
    q: str = Query("", description="研究者名または permalink"),
    profile_id: str = Query("profile", description="プロフィール描画先の ID"),
    ulid: str = Query("publist", description="論文リスト描画先 <ul> の ID"),
    limit: int = Query(DEFAULT_SEARCH_LIMIT, ge=1, description="論文の最大取得件数"),
    client: httpx.AsyncClient = Depends(get_client),
):
    """
    研究者を検索し、プロフィールと論文リストを取得

    - q が permalink 形式（英数字・_・-）ならそのまま使う
    - それ以外は名前で検索し、先頭の研究者を表示する
    """
    profile = Container(element_id=profile_id)
    publist = Container(element_id=ulid)
    await flows.search_researcher(client, q, profile, publist, limit=limit)
    return FlowResponse(containers=[profile, publist])
