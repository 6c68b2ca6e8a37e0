"""
Pydanticモデル定義

researchmap API のレスポンスは、描画前に必ずここでモデル化する。
未知のキー（@id, rm:* など）は無視し、欠けているフィールドは None / 空リストとして扱う。
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator

from .common import extract_researchmap_id


class BilingualText(BaseModel):
    """日英の多言語フィールド"""
    ja: Optional[str] = None
    en: Optional[str] = None


class Affiliation(BaseModel):
    """所属"""
    name: Optional[BilingualText] = None


class Profile(BaseModel):
    """研究者プロフィール（GET /<permalink>）"""
    name: Optional[BilingualText] = None
    image_url: Optional[str] = None
    affiliation: Optional[list[Affiliation]] = None


class ResearcherSummary(BaseModel):
    """研究者検索結果の1件"""
    model_config = ConfigDict(populate_by_name=True)

    permalink: Optional[str] = None
    id_url: Optional[str] = Field(None, alias="@id")

    def resolved_permalink(self) -> str:
        """permalink が無ければ @id の URL から取り出す"""
        permalink = self.permalink or extract_researchmap_id(self.id_url)
        if not permalink:
            raise ValueError("Search result has no permalink")
        return permalink


class ResearcherSearchPage(BaseModel):
    """研究者検索レスポンス（GET /researchers）"""
    items: list[ResearcherSummary] = []

    @field_validator("items", mode="before")
    @classmethod
    def items_none_to_empty(cls, v):
        """items: null は 0 件として扱う"""
        return [] if v is None else v


class Identifiers(BaseModel):
    """論文の識別子（DOI のみ使用）"""
    doi: Optional[list[Optional[str]]] = None


class PublishedPaper(BaseModel):
    """論文1件"""
    paper_title: Optional[BilingualText] = None
    publication_name: Optional[BilingualText] = None
    publication_date: Optional[str] = None
    published_paper_type: Optional[str] = None
    identifiers: Optional[Identifiers] = None


class PublicationPage(BaseModel):
    """論文リストレスポンス（GET /<permalink>/published_papers）"""
    items: list[PublishedPaper] = []
    number_of_items: Optional[int] = None

    @field_validator("items", mode="before")
    @classmethod
    def items_none_to_empty(cls, v):
        """items: null は 0 件として扱う"""
        return [] if v is None else v

    @property
    def total(self) -> int:
        if self.number_of_items is None:
            return len(self.items)
        return self.number_of_items


class PublicationQuery(BaseModel):
    """論文リストの検索条件"""
    limit: Optional[PositiveInt] = None
    from_date: Optional[str] = None
    to_date: Optional[str] = None

    @field_validator("from_date", "to_date")
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return v.strip()

    def to_params(self) -> dict:
        """指定された値だけをクエリパラメータにする"""
        return self.model_dump(exclude_none=True)


class Container(BaseModel):
    """
    描画先の要素

    html は要素の中身、trailer は要素の直後に置く内容（件数表示など）。
    """
    element_id: str
    html: str = ""
    trailer: str = ""

    def replace(self, html: str, trailer: str = "") -> None:
        self.html = html
        self.trailer = trailer


class PublistOptions(BaseModel):
    """論文リスト表示の流れごとの違い"""
    empty_message: str
    show_summary: bool = False


class PublistResult(BaseModel):
    """論文リストの描画結果"""
    html: str
    summary_html: str = ""
    displayed: int
    total: int


class FlowResponse(BaseModel):
    """APIレスポンス: 更新された描画先の一覧"""
    containers: list[Container]
