"""Content records and sections as served by Directus."""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ContentKind(str, Enum):
    """The three page collections, each paired with its section collection."""

    PAGE = "page"
    SSG_PAGE = "ssg_page"
    SSR_PAGE = "ssr_page"

    @property
    def section_field(self) -> str:
        """Name of the field holding the section ids on a record."""
        return {
            ContentKind.PAGE: "sections",
            ContentKind.SSG_PAGE: "ssg_sections",
            ContentKind.SSR_PAGE: "ssr_sections",
        }[self]

    @property
    def section_collection(self) -> str:
        return {
            ContentKind.PAGE: "section",
            ContentKind.SSG_PAGE: "ssg_section",
            ContentKind.SSR_PAGE: "ssr_section",
        }[self]

    @property
    def label(self) -> str:
        """Short rendering-strategy label shown on cards."""
        return {
            ContentKind.PAGE: "CSR",
            ContentKind.SSG_PAGE: "SSG",
            ContentKind.SSR_PAGE: "SSR",
        }[self]

    @property
    def listing_name(self) -> str:
        """Human name of the listing, used in error messages."""
        return {
            ContentKind.PAGE: "pages",
            ContentKind.SSG_PAGE: "ssg pages",
            ContentKind.SSR_PAGE: "ssr pages",
        }[self]

    def detail_path(self, record_id: Union[int, str]) -> str:
        return f"/{self.value}/{record_id}"


class ContentRecord(BaseModel):
    """A page of any kind, with its section references normalized to ``sections``."""

    model_config = ConfigDict(extra="ignore")

    kind: ContentKind
    id: int
    title: Optional[str] = None
    status: Optional[str] = None
    date_created: Optional[datetime] = None
    date_updated: Optional[datetime] = None
    sections: List[Any] = Field(default_factory=list)

    @property
    def section_count(self) -> int:
        return len(self.sections)

    @property
    def detail_path(self) -> str:
        return self.kind.detail_path(self.id)

    @classmethod
    def from_directus(cls, kind: ContentKind, payload: Dict[str, Any]) -> "ContentRecord":
        """Build a record from a raw Directus item of the given kind.

        A missing or null section field becomes an empty list.
        """
        fields = {
            key: value
            for key, value in payload.items()
            if key not in ("sections", "ssg_sections", "ssr_sections", "kind")
        }
        fields["sections"] = payload.get(kind.section_field) or []
        return cls(kind=kind, **fields)


class SelectionSection(BaseModel):
    """A section holding one value picked from a fixed set of choices."""

    model_config = ConfigDict(extra="ignore")

    id: int
    radio_button: Optional[Union[str, int, float, bool]] = None
    page_id: Optional[Union[int, str]] = None
    date_created: Optional[datetime] = None
    date_updated: Optional[datetime] = None


class EditorBlockData(BaseModel):
    model_config = ConfigDict(extra="allow")

    text: Any = None


class EditorBlock(BaseModel):
    """One block of rich-text editor output.

    Only ``data.text`` is rendered; a block whose text is missing or not a
    string renders as an empty paragraph.
    """

    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    type: Optional[str] = None
    data: Optional[EditorBlockData] = None

    @property
    def text(self) -> str:
        text = self.data.text if self.data is not None else None
        return text if isinstance(text, str) else ""


class TextEditor(BaseModel):
    model_config = ConfigDict(extra="allow")

    time: Optional[float] = None
    version: Optional[str] = None
    blocks: Optional[List[EditorBlock]] = None

    @property
    def has_blocks(self) -> bool:
        return bool(self.blocks)


class RichTextSection(BaseModel):
    """A section holding structured rich-text editor content."""

    model_config = ConfigDict(extra="ignore")

    id: int
    text_editor: Optional[TextEditor] = None
    page_id: Optional[Union[int, str]] = None
    date_created: Optional[datetime] = None
    date_updated: Optional[datetime] = None

    @property
    def paragraphs(self) -> List[str]:
        """Text of each block in order; empty when there is nothing to render."""
        if self.text_editor is None or not self.text_editor.has_blocks:
            return []
        return [block.text for block in self.text_editor.blocks]


class SSGPageData(BaseModel):
    """Everything the build-time detail page renders for one identifier."""

    page: Optional[ContentRecord] = None
    sections: List[SelectionSection] = Field(default_factory=list)


class SSRPageData(BaseModel):
    """Everything the per-request detail page renders for one identifier."""

    page: ContentRecord
    sections: List[RichTextSection] = Field(default_factory=list)
