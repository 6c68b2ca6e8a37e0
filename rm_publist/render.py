"""
論文・プロフィールの HTML 断片を生成する

表示内容の決定（日英のどちらを使うか、どの行を出すか）はビューモデルを作る関数で行い、
HTML への変換は templates/ の Jinja2 テンプレートに任せる。
API から来た文字列はすべてエスケープされる。

論文1件の表示ルール:
  1. タイトル: 日本語 → (英語を副題に) / 英語のみ / "[No title available]"
  2. 掲載誌行: 誌名 (年) [種別] / Published: 年 [種別] / 誌名も年もなければ行ごと省略
  3. DOI 行: identifiers.doi の最初の空でない値のみ、https://doi.org/<doi> へのリンク
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup
from pydantic import BaseModel

from .common import get_lang_fallback
from .config import (
    DOI_URL_TEMPLATE,
    NO_TITLE,
    PROFILE_URL_TEMPLATE,
    PUBLICATIONS_URL_TEMPLATE,
    UNKNOWN_AFFILIATION,
    UNKNOWN_NAME,
)
from .models import Profile, PublicationPage, PublishedPaper, PublistOptions, PublistResult

TEMPLATES_DIR = Path(__file__).parent / "templates"

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


# =========================
# View models
# =========================

class TitleView(BaseModel):
    primary: str
    secondary: Optional[str] = None
    is_placeholder: bool = False


class VenueView(BaseModel):
    journal: str = ""
    year: str = ""
    paper_type: str = ""


class DoiView(BaseModel):
    doi: str
    url: str


class PublicationView(BaseModel):
    title: TitleView
    venue: Optional[VenueView] = None
    doi: Optional[DoiView] = None


class ProfileView(BaseModel):
    name: str
    image_url: Optional[str] = None
    affiliations: Optional[str] = None
    profile_url: str
    publications_url: str


def select_title(paper: PublishedPaper) -> TitleView:
    """タイトルは必ず何か表示する（欠けていても項目を落とさない）"""
    ja = get_lang_fallback(paper.paper_title, prefer=("ja",))
    en = get_lang_fallback(paper.paper_title, prefer=("en",))
    if ja:
        return TitleView(primary=ja, secondary=en or None)
    if en:
        return TitleView(primary=en)
    return TitleView(primary=NO_TITLE, is_placeholder=True)


def build_venue(paper: PublishedPaper) -> Optional[VenueView]:
    """掲載誌・年・種別の行。誌名も年も無ければ None"""
    journal = get_lang_fallback(paper.publication_name)
    year = (paper.publication_date or "").strip()[:4]
    paper_type = paper.published_paper_type or ""

    if not journal and not year:
        return None
    return VenueView(journal=journal, year=year, paper_type=paper_type)


def build_doi(paper: PublishedPaper) -> Optional[DoiView]:
    """identifiers.doi のうち最初の空でない値"""
    dois = paper.identifiers.doi if paper.identifiers else None
    doi = next((d for d in dois or [] if d and d.strip()), None)
    if doi is None:
        return None
    return DoiView(doi=doi, url=DOI_URL_TEMPLATE.format(doi=doi))


def build_publication_view(paper: PublishedPaper) -> PublicationView:
    return PublicationView(
        title=select_title(paper),
        venue=build_venue(paper),
        doi=build_doi(paper),
    )


def build_profile_view(profile: Profile, permalink: str) -> ProfileView:
    """
    名前は常に表示（無ければ "Unknown Name"）。
    所属は一覧があるときだけ、各所属を日英フォールバックしてカンマ区切りにする。
    """
    affiliations = None
    if profile.affiliation:
        affiliations = ", ".join(
            get_lang_fallback(aff.name, default=UNKNOWN_AFFILIATION)
            for aff in profile.affiliation
        )

    return ProfileView(
        name=get_lang_fallback(profile.name, default=UNKNOWN_NAME),
        image_url=profile.image_url or None,
        affiliations=affiliations,
        profile_url=PROFILE_URL_TEMPLATE.format(permalink=permalink),
        publications_url=PUBLICATIONS_URL_TEMPLATE.format(permalink=permalink),
    )


# =========================
# HTML
# =========================

def render_publication_item(paper: PublishedPaper) -> str:
    """論文1件を <li> にする"""
    view = build_publication_view(paper)
    return _env.get_template("publication_item.html").render(view=view)


def render_publication_list(page: PublicationPage, options: PublistOptions) -> PublistResult:
    """
    論文リスト全体を描画する。API の並び順のまま出力する。

    0 件のときは options.empty_message の項目を1つだけ出す。
    """
    if not page.items:
        return PublistResult(
            html=render_list_message(options.empty_message),
            displayed=0,
            total=page.total,
        )

    html = "".join(render_publication_item(paper) for paper in page.items)
    displayed = len(page.items)

    summary_html = ""
    if options.show_summary:
        summary_html = str(Markup(
            "<p><small>Showing {} publications out of {} total.</small></p>"
        ).format(displayed, page.total))

    return PublistResult(html=html, summary_html=summary_html, displayed=displayed, total=page.total)


def render_profile(profile: Profile, permalink: str) -> str:
    view = build_profile_view(profile, permalink)
    return _env.get_template("profile.html").render(profile=view)


def describe_error(exc: Exception) -> str:
    return str(exc) or exc.__class__.__name__


def render_message(text: str) -> str:
    return str(Markup("<p>{}</p>").format(text))


def render_list_message(text: str) -> str:
    return str(Markup("<li>{}</li>").format(text))


def render_list_error(exc: Exception) -> str:
    return str(Markup('<li class="error">Error loading publications: {}</li>').format(describe_error(exc)))


def render_profile_error(exc: Exception) -> str:
    return str(Markup('<p class="error">Error: {}</p>').format(describe_error(exc)))
