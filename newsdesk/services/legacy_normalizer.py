"""Turn legacy free-text article bodies into tagged article HTML.

Articles stored before the block editor existed are plain text with manual
line breaks. This module gives them the same markup the block renderer
produces (paragraphs and lists) and promotes instructional paragraphs such as
"How do I ...? First ... Then ... Then ..." into a numbered steps card. The
output is display-only; it is never converted back into blocks.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from newsdesk.config import Settings, settings
from newsdesk.schemas.blocks import BLOCK_ATTR, ParagraphBlock
from newsdesk.services.content_renderer import render_block, render_list_items
from newsdesk.services.inline_format import escape_and_format

logger = logging.getLogger(__name__)

_LINE_SPLIT_RE = re.compile(r"\r?\n")
_BULLET_RE = re.compile(r"^\s*[-•●▪]\s+(.*)$")
_NUMBERED_RE = re.compile(r"^\s*\d+[.)]\s+(.*)$")
_WHITESPACE_RE = re.compile(r"\s+")
_SPACE_BEFORE_PUNCT_RE = re.compile(r"\s+([.!?])")
_SENTENCE_SPLIT_RE = re.compile(r"(?<=[.!?])\s+")
_LEADING_DASH_RE = re.compile(r"^[-–—]+\s*")
_TRAILING_PUNCT_RE = re.compile(r"[.!?:;…]+$")
_LEAD_WORD_RE = re.compile(r"[^\W\d_]+")


@dataclass
class _ListAccumulator:
    style: str | None = None
    items: list[str] = field(default_factory=list)

    def add(self, style: str, item: str, output: list[str]) -> None:
        if self.style is not None and self.style != style:
            self.flush(output)
        self.style = style
        self.items.append(item)

    def flush(self, output: list[str]) -> None:
        if self.style is not None and self.items:
            rendered = render_list_items(self.items, self.style)
            if rendered:
                output.append(rendered)
        self.style = None
        self.items = []


def _split_sentences(line: str) -> list[str]:
    normalized = _WHITESPACE_RE.sub(" ", line).strip()
    normalized = _SPACE_BEFORE_PUNCT_RE.sub(r"\1", normalized)
    return [segment for segment in _SENTENCE_SPLIT_RE.split(normalized) if segment.strip()]


def _clean_segment(segment: str) -> str:
    cleaned = _LEADING_DASH_RE.sub("", segment.strip())
    return _TRAILING_PUNCT_RE.sub("", cleaned).strip()


def _starts_with_lead_word(heading: str, lead_words: frozenset[str]) -> bool:
    match = _LEAD_WORD_RE.match(heading)
    return match is not None and match.group(0).lower() in lead_words


def _extract_steps(line: str, app_settings: Settings) -> tuple[str, list[str]] | None:
    """Return (title, steps) when the line reads as a question followed by steps."""
    segments = _split_sentences(line)
    if len(segments) < app_settings.steps_min_sentences:
        return None

    heading = _clean_segment(segments[0])
    steps: list[str] = []
    for segment in segments[1:]:
        step = _clean_segment(segment)
        if step and step not in steps:
            steps.append(step)

    if not _starts_with_lead_word(heading, app_settings.steps_lead_word_set):
        return None
    if len(steps) < app_settings.steps_min_items:
        return None
    return heading, steps


def render_steps_card(title: str, steps: list[str]) -> str:
    """Titled card with a two-column numbered list of steps."""
    items = "".join(
        f'<li class="article-steps-item"><span class="article-steps-index">{index:02d}</span>'
        f'<span class="article-steps-text">{escape_and_format(step)}</span></li>'
        for index, step in enumerate(steps, start=1)
    )
    return (
        f'<section {BLOCK_ATTR}="steps" class="article-steps">'
        f'<h3 class="article-steps-title">{escape_and_format(title)}</h3>'
        f'<ol class="article-steps-list article-steps-list--two-column">{items}</ol></section>'
    )


def normalize_legacy_text(raw: str, *, app_settings: Settings | None = None) -> str:
    """Render legacy plain text as tagged paragraphs, lists, and steps cards."""
    app_settings = app_settings or settings
    output: list[str] = []
    pending_list = _ListAccumulator()

    for line in _LINE_SPLIT_RE.split(raw or ""):
        if not line.strip():
            pending_list.flush(output)
            continue

        bullet = _BULLET_RE.match(line)
        if bullet:
            pending_list.add("unordered", bullet.group(1), output)
            continue

        numbered = _NUMBERED_RE.match(line)
        if numbered:
            pending_list.add("ordered", numbered.group(1), output)
            continue

        pending_list.flush(output)
        steps = _extract_steps(line, app_settings)
        if steps is not None:
            title, items = steps
            logger.debug("Promoted legacy paragraph to steps", extra={"steps": len(items)})
            output.append(render_steps_card(title, items))
            continue

        output.append(render_block(ParagraphBlock(text=line)))

    pending_list.flush(output)
    return "\n".join(part for part in output if part).strip()
