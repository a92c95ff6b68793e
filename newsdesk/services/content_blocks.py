"""Block factory and JSON persistence helpers."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ValidationError

from newsdesk.core.exceptions import BlockPayloadError
from newsdesk.schemas.blocks import (
    BLOCK_ADAPTER,
    BLOCK_TYPES,
    ContentBlock,
    CtaBlock,
    HeadingBlock,
    ImageBlock,
    ListBlock,
    ParagraphBlock,
    QuoteBlock,
)

logger = logging.getLogger(__name__)

_KNOWN_BLOCK_CLASSES = (ParagraphBlock, HeadingBlock, QuoteBlock, ListBlock, ImageBlock, CtaBlock)


def create_empty_block(block_type: str) -> ContentBlock:
    """Return a new block of ``block_type`` with a fresh id and editor defaults.

    Unknown types fall back to a paragraph.
    """
    if block_type == "heading":
        return HeadingBlock(level="h2", text="")
    if block_type == "quote":
        return QuoteBlock(text="", author="")
    if block_type == "list":
        return ListBlock(style="unordered", items=[""])
    if block_type == "image":
        return ImageBlock(url="", caption="", alt="")
    if block_type == "cta":
        return CtaBlock(title="", description="", button_label="", button_url="")
    return ParagraphBlock(text="")


def coerce_block(raw: Any) -> ContentBlock | None:
    """Return ``raw`` as a block model, or None if it is not a known variant."""
    if isinstance(raw, _KNOWN_BLOCK_CLASSES):
        return raw
    if isinstance(raw, BaseModel):
        return None
    if not isinstance(raw, Mapping):
        return None
    if raw.get("type") not in BLOCK_TYPES:
        return None
    try:
        return BLOCK_ADAPTER.validate_python(dict(raw))
    except ValidationError as e:
        logger.debug(
            "Skipping invalid block",
            extra={"block_type": raw.get("type"), "errors": e.error_count()},
        )
        return None


def dump_blocks_json(blocks: Iterable[ContentBlock]) -> str:
    """Serialize blocks to a JSON array using the stored camelCase field names."""
    return json.dumps(
        [block.model_dump(mode="json", by_alias=True) for block in blocks],
        ensure_ascii=False,
    )


def load_blocks_json(payload: str) -> list[ContentBlock]:
    """Deserialize a JSON array of blocks, skipping entries that are not known variants."""
    try:
        raw_blocks = json.loads(payload)
    except json.JSONDecodeError as e:
        raise BlockPayloadError(str(e)) from e

    if not isinstance(raw_blocks, list):
        raise BlockPayloadError(f"expected a JSON array, got {type(raw_blocks).__name__}")

    blocks: list[ContentBlock] = []
    for raw in raw_blocks:
        block = coerce_block(raw)
        if block is None:
            logger.debug("Skipping unknown stored block", extra={"raw_type": _raw_type(raw)})
            continue
        blocks.append(block)
    return blocks


def _raw_type(raw: Any) -> str:
    if isinstance(raw, Mapping):
        return str(raw.get("type"))
    return type(raw).__name__
