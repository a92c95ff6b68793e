"""Second-pass restyling of rendered CTA sections.

Only touches ``<section data-block="cta">`` elements written by the block
renderer (or by this module), which have a fixed, non-nested shape.
General HTML goes through the content parser.
"""

from __future__ import annotations

import logging
import re

from newsdesk.config import Settings, settings
from newsdesk.schemas.blocks import BLOCK_ATTR

logger = logging.getLogger(__name__)

_CTA_SECTION_RE = re.compile(
    rf"""<section\b[^>]*\b{BLOCK_ATTR}\s*=\s*(["'])cta\1[^>]*>(.*?)</section\s*>""",
    re.IGNORECASE | re.DOTALL,
)
_HEADING_RE = re.compile(r"<h([1-6])\b[^>]*>(.*?)</h\1\s*>", re.IGNORECASE | re.DOTALL)
_PARAGRAPH_RE = re.compile(r"<p\b[^>]*>(.*?)</p\s*>", re.IGNORECASE | re.DOTALL)
_LINK_RE = re.compile(r"<a\b([^>]*)>(.*?)</a\s*>", re.IGNORECASE | re.DOTALL)
_HREF_RE = re.compile(r"""\bhref\s*=\s*(["'])(.*?)\1""", re.IGNORECASE | re.DOTALL)
_ICON_RE = re.compile(
    r"""<svg\b[^>]*\bclass\s*=\s*(["'])[^"']*\barticle-cta-icon\b[^"']*\1[^>]*>.*?</svg\s*>""",
    re.IGNORECASE | re.DOTALL,
)

BUTTON_ICON = (
    '<svg class="article-cta-icon" aria-hidden="true" viewBox="0 0 24 24" '
    'width="20" height="20" fill="none" stroke="currentColor" stroke-width="2">'
    '<path d="M5 12h14M13 5l7 7-7 7" /></svg>'
)


def _extract_link(body: str) -> tuple[str, str] | None:
    link = _LINK_RE.search(body)
    if link is None:
        return None
    href = _HREF_RE.search(link.group(1))
    if href is None:
        return None
    label = _ICON_RE.sub("", link.group(2)).strip()
    return href.group(2), label


def _rewrite_section(match: re.Match[str], with_icon: bool) -> str:
    body = match.group(2)
    heading = _HEADING_RE.search(body)
    paragraph = _PARAGRAPH_RE.search(body)
    link = _extract_link(body)

    if heading is None and paragraph is None and link is None:
        return match.group(0)

    parts: list[str] = []
    if heading is not None:
        parts.append(f'<h3 class="article-cta-title">{heading.group(2).strip()}</h3>')
    if paragraph is not None:
        parts.append(f'<p class="article-cta-description">{paragraph.group(1).strip()}</p>')
    if link is not None:
        href, label = link
        icon = BUTTON_ICON if with_icon else ""
        parts.append(f'<a class="article-cta-button" href="{href}">{label}{icon}</a>')

    return (
        f'<section {BLOCK_ATTR}="cta" class="article-cta article-cta--enhanced">'
        f'<div class="article-cta-panel">{"".join(parts)}</div></section>'
    )


def enhance_cta_sections(html: str, *, app_settings: Settings | None = None) -> str:
    """Rewrap every CTA section in the enhanced card template.

    Title, description and button are carried over verbatim from the first
    heading, paragraph and link of each section. Everything outside CTA
    sections is left byte-for-byte unchanged.
    """
    if not html:
        return ""

    with_icon = (app_settings or settings).cta_button_icon
    enhanced, count = _CTA_SECTION_RE.subn(lambda match: _rewrite_section(match, with_icon), html)
    if count:
        logger.debug("Enhanced CTA sections", extra={"count": count})
    return enhanced
