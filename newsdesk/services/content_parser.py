"""Parse tagged article HTML back into content blocks.

Works on a BeautifulSoup tree, never on regexes: stored HTML may come from
anywhere. Untagged HTML falls back to one paragraph per blank-line separated
chunk of its text. Inline emphasis is flattened to plain text.
"""

from __future__ import annotations

import logging
import re

from bs4 import BeautifulSoup, FeatureNotFound
from bs4.element import Comment, NavigableString, Tag

from newsdesk.config import Settings, settings
from newsdesk.core.exceptions import HtmlParserUnavailableError
from newsdesk.schemas.blocks import (
    BLOCK_ATTR,
    HEADING_LEVELS,
    LEVEL_ATTR,
    LIST_STYLES,
    STYLE_ATTR,
    ContentBlock,
    CtaBlock,
    HeadingBlock,
    ImageBlock,
    ListBlock,
    ParagraphBlock,
    QuoteBlock,
)

logger = logging.getLogger(__name__)

_BLANK_LINES_RE = re.compile(r"\n{2,}")
_HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]
# Closing one of these inside a block starts a new line of text.
_LINE_BOUNDARY_TAGS = frozenset({"p", "div", *_HEADING_TAGS})


def _make_soup(html: str, app_settings: Settings) -> BeautifulSoup:
    try:
        return BeautifulSoup(html, app_settings.html_parser)
    except FeatureNotFound as e:
        raise HtmlParserUnavailableError(app_settings.html_parser) from e


def _text(element: Tag | None) -> str:
    if element is None:
        return ""
    return element.get_text().replace("\u00a0", " ").strip()


def _collect_text(node: Tag, pieces: list[str], skip_tags: frozenset[str]) -> None:
    for child in node.children:
        if isinstance(child, Comment):
            continue
        if isinstance(child, NavigableString):
            pieces.append(str(child))
            continue
        if not isinstance(child, Tag) or child.name in skip_tags:
            continue
        if child.name == "br":
            pieces.append("\n")
            continue
        _collect_text(child, pieces, skip_tags)
        if child.name in _LINE_BOUNDARY_TAGS:
            pieces.append("\n")


def extract_text_with_line_breaks(element: Tag, skip_tags: frozenset[str] = frozenset()) -> str:
    """Text of ``element`` with ``<br>`` and paragraph ends kept as newlines."""
    pieces: list[str] = []
    _collect_text(element, pieces, skip_tags)
    return "".join(pieces).replace("\u00a0", " ").strip()


def _parse_heading(element: Tag) -> HeadingBlock:
    level = element.get(LEVEL_ATTR)
    if level not in HEADING_LEVELS:
        level = "h2"
    return HeadingBlock(level=level, text=_text(element))


def _parse_quote(element: Tag) -> QuoteBlock:
    return QuoteBlock(
        text=extract_text_with_line_breaks(element, skip_tags=frozenset({"footer"})),
        author=_text(element.find("footer")),
    )


def _parse_list(element: Tag) -> ListBlock:
    style = element.get(STYLE_ATTR)
    if style not in LIST_STYLES:
        style = "ordered" if element.name == "ol" else "unordered"
    return ListBlock(style=style, items=[_text(item) for item in element.find_all("li")])


def _parse_image(element: Tag) -> ImageBlock:
    image = element.find("img")
    url = ""
    alt = ""
    if image is not None:
        url = str(image.get("src") or "").strip()
        alt = str(image.get("alt") or "")
    return ImageBlock(url=url, alt=alt, caption=_text(element.find("figcaption")))


def _parse_cta(element: Tag) -> CtaBlock:
    description = element.find("p")
    link = element.find("a")
    return CtaBlock(
        title=_text(element.find(_HEADING_TAGS)),
        description=extract_text_with_line_breaks(description) if description is not None else "",
        button_label=_text(link),
        button_url=str(link.get("href") or "") if link is not None else "",
    )


def _parse_paragraph(element: Tag) -> ParagraphBlock:
    return ParagraphBlock(text=extract_text_with_line_breaks(element) or _text(element))


_PARSERS = {
    "heading": _parse_heading,
    "quote": _parse_quote,
    "list": _parse_list,
    "image": _parse_image,
    "cta": _parse_cta,
    "paragraph": _parse_paragraph,
}


def _parse_untagged(soup: BeautifulSoup) -> list[ContentBlock]:
    text = soup.get_text().strip()
    if not text:
        return []
    return [
        ParagraphBlock(text=chunk)
        for chunk in (part.strip() for part in _BLANK_LINES_RE.split(text))
        if chunk
    ]


def parse_html_to_blocks(html: str, *, app_settings: Settings | None = None) -> list[ContentBlock]:
    """Rebuild the block list from rendered HTML.

    Every block gets a fresh id. Unknown discriminators are read as paragraphs.

    Raises:
        HtmlParserUnavailableError: the configured tree builder is not installed.
    """
    if not html:
        return []

    soup = _make_soup(html, app_settings or settings)
    elements = soup.find_all(attrs={BLOCK_ATTR: True})

    if not elements:
        paragraphs = _parse_untagged(soup)
        logger.debug("Parsed untagged HTML as paragraphs", extra={"count": len(paragraphs)})
        return paragraphs

    blocks: list[ContentBlock] = []
    for element in elements:
        block_type = element.get(BLOCK_ATTR)
        parser = _PARSERS.get(block_type)
        if parser is None:
            logger.debug("Reading unknown block type as paragraph", extra={"block_type": block_type})
            parser = _parse_paragraph
        blocks.append(parser(element))
    return blocks
