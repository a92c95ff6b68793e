"""Immutable block-list operations used by the editor shell.

Every function returns a new list and leaves its input untouched. Blocks are
replaced by id at their position, never mutated in place.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any, Literal

from newsdesk.schemas.blocks import BLOCK_ADAPTER, ContentBlock, ListBlock
from newsdesk.services.content_blocks import create_empty_block

logger = logging.getLogger(__name__)

MoveDirection = Literal["up", "down"]

_PROTECTED_FIELDS = frozenset({"id", "type"})


def add_block(blocks: Sequence[ContentBlock], block_type: str) -> list[ContentBlock]:
    """Append an empty block of ``block_type``."""
    return [*blocks, create_empty_block(block_type)]


def update_block(
    blocks: Sequence[ContentBlock],
    block_id: str,
    updated: ContentBlock,
) -> list[ContentBlock]:
    """Replace the block with ``block_id`` by ``updated``."""
    return [updated if block.id == block_id else block for block in blocks]


def update_block_fields(
    blocks: Sequence[ContentBlock],
    block_id: str,
    **changes: Any,
) -> list[ContentBlock]:
    """Copy-on-write patch of one block's fields.

    The patched block is validated again; ``id`` and ``type`` are not patchable.
    """
    protected = _PROTECTED_FIELDS.intersection(changes)
    if protected:
        raise ValueError(f"Cannot patch block fields: {', '.join(sorted(protected))}")

    def patch(block: ContentBlock) -> ContentBlock:
        data = block.model_dump()
        data.update(changes)
        return BLOCK_ADAPTER.validate_python(data)

    return _replace_where(blocks, block_id, patch)


def remove_block(blocks: Sequence[ContentBlock], block_id: str) -> list[ContentBlock]:
    return [block for block in blocks if block.id != block_id]


def move_block(
    blocks: Sequence[ContentBlock],
    index: int,
    direction: MoveDirection,
) -> list[ContentBlock]:
    """Swap the block at ``index`` with its neighbour; out-of-range moves are no-ops."""
    target = index - 1 if direction == "up" else index + 1
    moved = list(blocks)
    if not 0 <= index < len(moved) or not 0 <= target < len(moved):
        return moved
    moved[index], moved[target] = moved[target], moved[index]
    return moved


def set_list_item(
    blocks: Sequence[ContentBlock],
    block_id: str,
    item_index: int,
    value: str,
) -> list[ContentBlock]:
    def patch(block: ListBlock) -> ListBlock:
        if not 0 <= item_index < len(block.items):
            return block
        items = list(block.items)
        items[item_index] = value
        return block.model_copy(update={"items": items})

    return _replace_list_block(blocks, block_id, patch)


def add_list_item(blocks: Sequence[ContentBlock], block_id: str) -> list[ContentBlock]:
    return _replace_list_block(
        blocks,
        block_id,
        lambda block: block.model_copy(update={"items": [*block.items, ""]}),
    )


def remove_list_item(
    blocks: Sequence[ContentBlock],
    block_id: str,
    item_index: int,
) -> list[ContentBlock]:
    """Drop one list item. A list never ends up empty: it keeps one blank item."""

    def patch(block: ListBlock) -> ListBlock:
        items = [item for index, item in enumerate(block.items) if index != item_index]
        return block.model_copy(update={"items": items or [""]})

    return _replace_list_block(blocks, block_id, patch)


def _replace_where(
    blocks: Sequence[ContentBlock],
    block_id: str,
    patch: Callable[[Any], ContentBlock],
) -> list[ContentBlock]:
    result: list[ContentBlock] = []
    found = False
    for block in blocks:
        if block.id == block_id:
            found = True
            result.append(patch(block))
        else:
            result.append(block)
    if not found:
        logger.debug("Block not found for update", extra={"block_id": block_id})
    return result


def _replace_list_block(
    blocks: Sequence[ContentBlock],
    block_id: str,
    patch: Callable[[ListBlock], ListBlock],
) -> list[ContentBlock]:
    def guarded(block: ContentBlock) -> ContentBlock:
        if not isinstance(block, ListBlock):
            return block
        return patch(block)

    return _replace_where(blocks, block_id, guarded)
