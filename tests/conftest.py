"""
テスト共通フィクスチャ

researchmap API は httpx.MockTransport で置き換え、実際の通信は行わない。
"""

import asyncio

import httpx
import pytest


class FakeResearchmap:
    """パスごとに (ステータス, JSON) を返す researchmap API の代役"""

    def __init__(self, routes=None):
        self.routes = routes or {}
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"message": "not found"})
        if isinstance(route, Exception):
            raise route
        status, body = route
        if isinstance(body, bytes):
            return httpx.Response(status, content=body)
        return httpx.Response(status, json=body)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))

    def paths(self):
        return [r.url.path for r in self.requests]


@pytest.fixture
def fake_api():
    """FakeResearchmap を作るファクトリ"""
    return FakeResearchmap


@pytest.fixture
def run():
    """クライアントを開いて非同期関数を実行する"""
    def _run(api, func, *args, **kwargs):
        async def _main():
            async with api.client() as client:
                return await func(client, *args, **kwargs)
        return asyncio.run(_main())
    return _run


def paper(ja=None, en=None, journal_ja=None, journal_en=None, date=None, paper_type=None, doi=None):
    """論文1件分の API レスポンスを組み立てる"""
    item = {"@id": "https://api.researchmap.jp/tanaka_taro/published_papers/1"}
    if ja is not None or en is not None:
        item["paper_title"] = {k: v for k, v in (("ja", ja), ("en", en)) if v is not None}
    if journal_ja is not None or journal_en is not None:
        item["publication_name"] = {k: v for k, v in (("ja", journal_ja), ("en", journal_en)) if v is not None}
    if date is not None:
        item["publication_date"] = date
    if paper_type is not None:
        item["published_paper_type"] = paper_type
    if doi is not None:
        item["identifiers"] = {"doi": doi}
    return item


@pytest.fixture
def tanaka_papers():
    """tanaka_taro の論文3件（2件は日本語タイトル+DOI、1件は英語タイトルのみ）"""
    return {
        "items": [
            paper(ja="日本語論文その1", en="Japanese Paper 1", journal_ja="情報処理学会論文誌",
                  date="2021-04-01", paper_type="scientific_journal", doi=["10.1234/abc.1"]),
            paper(ja="日本語論文その2", journal_en="Journal of Testing",
                  date="2019", doi=["10.1234/abc.2", "10.9999/ignored"]),
            paper(en="English Only Paper", date="2018-12"),
        ],
        "number_of_items": 12,
    }


@pytest.fixture
def tanaka_profile():
    return {
        "@id": "https://api.researchmap.jp/tanaka_taro",
        "name": {"ja": "田中 太郎", "en": "Taro Tanaka"},
        "image_url": "https://researchmap.jp/tanaka_taro/avatar.jpg",
        "affiliation": [
            {"name": {"ja": "人間文化研究機構"}},
            {"name": {"en": "National Museum of Ethnology"}},
        ],
    }


@pytest.fixture
def make_paper():
    return paper
