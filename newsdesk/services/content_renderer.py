"""Deterministic renderer from content blocks to tagged article HTML."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from newsdesk.schemas.blocks import (
    BLOCK_ATTR,
    LEVEL_ATTR,
    STYLE_ATTR,
    ContentBlock,
    CtaBlock,
    HeadingBlock,
    ImageBlock,
    ListBlock,
    ParagraphBlock,
    QuoteBlock,
)
from newsdesk.services.content_blocks import coerce_block
from newsdesk.services.inline_format import escape_and_format, escape_html, line_break_format

logger = logging.getLogger(__name__)

IMAGE_ALT_PLACEHOLDER = "image"


def _clean(value: str | None) -> str:
    return (value or "").strip()


def _render_paragraph(block: ParagraphBlock) -> str:
    text = _clean(block.text)
    if not text:
        return ""
    return f'<p {BLOCK_ATTR}="paragraph" class="article-paragraph">{line_break_format(text)}</p>'


def _render_heading(block: HeadingBlock) -> str:
    text = _clean(block.text)
    if not text:
        return ""
    tag = block.level
    return (
        f'<{tag} {BLOCK_ATTR}="heading" {LEVEL_ATTR}="{block.level}" class="article-heading">'
        f"{escape_and_format(text)}</{tag}>"
    )


def _render_quote(block: QuoteBlock) -> str:
    text = _clean(block.text)
    if not text:
        return ""
    author = _clean(block.author)
    author_html = f'<footer class="article-quote-author">{escape_and_format(author)}</footer>' if author else ""
    return (
        f'<blockquote {BLOCK_ATTR}="quote" class="article-quote">'
        f"<p>{line_break_format(text)}</p>{author_html}</blockquote>"
    )


def render_list_items(items: Iterable[str], style: str) -> str:
    """Render a list element from raw items; blank items are dropped."""
    item_html = "".join(
        f"<li>{escape_and_format(item)}</li>" for item in (_clean(raw) for raw in items) if item
    )
    if not item_html:
        return ""
    tag = "ol" if style == "ordered" else "ul"
    return f'<{tag} {BLOCK_ATTR}="list" {STYLE_ATTR}="{style}" class="article-list">{item_html}</{tag}>'


def _render_list(block: ListBlock) -> str:
    return render_list_items(block.items, block.style)


def _render_image(block: ImageBlock) -> str:
    url = _clean(block.url)
    if not url:
        return ""
    caption = _clean(block.caption)
    alt_text = _clean(block.alt) or caption or IMAGE_ALT_PLACEHOLDER
    caption_html = f"<figcaption>{escape_and_format(caption)}</figcaption>" if caption else ""
    return (
        f'<figure {BLOCK_ATTR}="image" class="article-image">'
        f'<img src="{escape_html(url)}" alt="{escape_html(alt_text)}" />{caption_html}</figure>'
    )


def _render_cta(block: CtaBlock) -> str:
    title = _clean(block.title)
    description = _clean(block.description)
    button_label = _clean(block.button_label)
    button_url = _clean(block.button_url)
    has_button = bool(button_label and button_url)
    # A lone label without a url has nothing to show.
    if not title and not description and not has_button:
        return ""

    title_html = f"<h3>{escape_and_format(title)}</h3>" if title else ""
    description_html = f"<p>{line_break_format(description)}</p>" if description else ""
    button_html = (
        f'<a class="cta-button" href="{escape_html(button_url)}">{escape_html(button_label)}</a>'
        if has_button
        else ""
    )
    return (
        f'<section {BLOCK_ATTR}="cta" class="article-cta">'
        f"{title_html}{description_html}{button_html}</section>"
    )


_RENDERERS = {
    "paragraph": _render_paragraph,
    "heading": _render_heading,
    "quote": _render_quote,
    "list": _render_list,
    "image": _render_image,
    "cta": _render_cta,
}


def render_block(block: ContentBlock) -> str:
    """Render one block; returns "" when the block has no effective content."""
    return _RENDERERS[block.type](block)


def render_blocks_to_html(blocks: Iterable[ContentBlock | Any]) -> str:
    """Render blocks in order, one tagged element per non-empty block.

    Entries that are not a known block variant are skipped.
    """
    parts: list[str] = []
    for raw_block in blocks:
        block = coerce_block(raw_block)
        if block is None:
            logger.debug("Skipping unknown block during render", extra={"raw_type": type(raw_block).__name__})
            continue
        rendered = render_block(block)
        if rendered:
            parts.append(rendered)
    return "\n".join(parts).strip()
