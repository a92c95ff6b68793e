"""Content block schemas.

An article body is an ordered list of typed blocks. Every variant carries a
``type`` discriminator and an opaque ``id`` that only the editor's list
operations use. Blocks are frozen: edits produce a new block value.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, Field, TypeAdapter, field_validator

from newsdesk.config import settings
from newsdesk.core.ids import generate_cuid

ContentBlockType = Literal["paragraph", "heading", "quote", "list", "image", "cta"]
HeadingLevel = Literal["h2", "h3"]
ListStyle = Literal["unordered", "ordered"]

BLOCK_TYPES: tuple[str, ...] = ("paragraph", "heading", "quote", "list", "image", "cta")
HEADING_LEVELS: tuple[str, ...] = ("h2", "h3")
LIST_STYLES: tuple[str, ...] = ("unordered", "ordered")

# HTML attributes written by the renderer and read back by the parser.
BLOCK_ATTR = "data-block"
LEVEL_ATTR = "data-level"
STYLE_ATTR = "data-style"


def new_block_id() -> str:
    """Fresh block identifier."""
    return generate_cuid(settings.block_id_length)


class BaseBlock(BaseModel):
    """Fields shared by every block variant."""

    model_config = {"frozen": True, "populate_by_name": True}

    id: str = Field(default_factory=new_block_id)


class ParagraphBlock(BaseBlock):
    """Free inline text; may contain emphasis markers."""

    type: Literal["paragraph"] = "paragraph"
    text: str = ""


class HeadingBlock(BaseBlock):
    """Section heading."""

    type: Literal["heading"] = "heading"
    level: HeadingLevel = "h2"
    text: str = ""


class QuoteBlock(BaseBlock):
    """Block quotation with optional attribution."""

    type: Literal["quote"] = "quote"
    text: str = ""
    author: str | None = None


class ListBlock(BaseBlock):
    """Ordered or unordered list.

    Blank items are kept while editing and dropped at render time. A list
    always holds at least one item.
    """

    type: Literal["list"] = "list"
    style: ListStyle = "unordered"
    items: list[str] = Field(default_factory=lambda: [""])

    @field_validator("items")
    @classmethod
    def keep_one_item(cls, value: list[str]) -> list[str]:
        return value or [""]


class ImageBlock(BaseBlock):
    """Image reference. An empty url renders nothing."""

    type: Literal["image"] = "image"
    url: str = ""
    caption: str | None = None
    alt: str | None = None


class CtaBlock(BaseBlock):
    """Call-to-action. The button renders only when both label and url are set."""

    type: Literal["cta"] = "cta"
    title: str = ""
    description: str = ""
    button_label: str | None = Field(default=None, alias="buttonLabel")
    button_url: str | None = Field(default=None, alias="buttonUrl")


ContentBlock = Annotated[
    ParagraphBlock | HeadingBlock | QuoteBlock | ListBlock | ImageBlock | CtaBlock,
    Field(discriminator="type"),
]

BLOCK_ADAPTER = TypeAdapter(ContentBlock)
