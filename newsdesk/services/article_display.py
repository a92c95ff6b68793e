"""Public article body rendering."""

from __future__ import annotations

import logging
import re

from newsdesk.config import Settings
from newsdesk.schemas.blocks import BLOCK_ATTR
from newsdesk.services.cta_enhancer import enhance_cta_sections
from newsdesk.services.legacy_normalizer import normalize_legacy_text

logger = logging.getLogger(__name__)

_TAGGED_RE = re.compile(rf"<[a-z][^>]*\b{BLOCK_ATTR}\s*=", re.IGNORECASE)
# Stored HTML has at least one closing tag or void element.
_HTML_TAG_RE = re.compile(r"</[a-z][a-z0-9]*\s*>|<(?:br|hr|img)\b[^<>]*>", re.IGNORECASE)


def render_article_body(content: str, *, app_settings: Settings | None = None) -> str:
    """Display HTML for a stored article body.

    Block-editor HTML gets the CTA finishing pass, untagged HTML is shown as
    stored, and plain legacy text is normalized first.
    """
    if not content or not content.strip():
        return ""

    if _TAGGED_RE.search(content):
        return enhance_cta_sections(content, app_settings=app_settings)

    if _HTML_TAG_RE.search(content):
        logger.debug("Displaying untagged HTML as stored")
        return content

    normalized = normalize_legacy_text(content, app_settings=app_settings)
    return enhance_cta_sections(normalized, app_settings=app_settings)
