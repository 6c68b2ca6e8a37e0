"""
FastAPIアプリケーション

researchmap の研究者プロフィールと論文リストを表示する。

起動:
  uvicorn rm_publist.main:app --port 8000
"""

import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.templating import Jinja2Templates

from .routers import publications

# FastAPIアプリケーション作成
app = FastAPI(
    title="researchmap Publication List",
    description="researchmap 研究者プロフィール・論文リスト表示 API",
    version="1.0.0",
    docs_url="/docs",
    openapi_url="/openapi.json",
)

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))

# ルーター登録
app.include_router(publications.router, prefix="/api", tags=["publications"])


@app.get("/")
async def index(request: Request):
    """
    トップページ（検索画面）
    """
    return templates.TemplateResponse(request, "index.html")


@app.get("/health")
async def health_check():
    """
    ヘルスチェック
    """
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    # 開発時は直接実行可能
    uvicorn.run(
        "rm_publist.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
