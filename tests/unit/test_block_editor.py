"""Tests for immutable editor block-list operations."""

import pytest

from newsdesk.schemas.blocks import HeadingBlock, ImageBlock, ListBlock, ParagraphBlock
from newsdesk.services.block_editor import (
    add_block,
    add_list_item,
    move_block,
    remove_block,
    remove_list_item,
    set_list_item,
    update_block,
    update_block_fields,
)


def _blocks() -> list:
    return [
        ParagraphBlock(id="p1", text="One"),
        ListBlock(id="l1", items=["a", "b"]),
        HeadingBlock(id="h1", text="Title"),
    ]


def test_add_block_appends_empty_block_without_touching_input() -> None:
    blocks = _blocks()

    updated = add_block(blocks, "image")

    assert len(blocks) == 3
    assert len(updated) == 4
    assert isinstance(updated[-1], ImageBlock)
    assert updated[:3] == blocks


def test_update_block_replaces_by_id_in_place() -> None:
    blocks = _blocks()
    replacement = ParagraphBlock(id="p1", text="Changed")

    updated = update_block(blocks, "p1", replacement)

    assert updated[0] is replacement
    assert blocks[0].text == "One"


def test_update_block_fields_is_copy_on_write() -> None:
    blocks = _blocks()

    updated = update_block_fields(blocks, "h1", level="h3", text="New title")

    assert updated[2].level == "h3"
    assert updated[2].text == "New title"
    assert updated[2].id == "h1"
    assert blocks[2].level == "h2"
    assert updated[1] is blocks[1]


def test_update_block_fields_rejects_id_and_type_changes() -> None:
    with pytest.raises(ValueError):
        update_block_fields(_blocks(), "p1", id="other")


def test_unknown_id_returns_unchanged_copy() -> None:
    blocks = _blocks()

    updated = update_block_fields(blocks, "missing", text="x")

    assert updated == blocks
    assert updated is not blocks


def test_remove_block() -> None:
    assert [block.id for block in remove_block(_blocks(), "l1")] == ["p1", "h1"]


def test_move_block_swaps_neighbours_and_ignores_edges() -> None:
    blocks = _blocks()

    assert [block.id for block in move_block(blocks, 0, "down")] == ["l1", "p1", "h1"]
    assert [block.id for block in move_block(blocks, 2, "up")] == ["p1", "h1", "l1"]
    assert [block.id for block in move_block(blocks, 0, "up")] == ["p1", "l1", "h1"]
    assert [block.id for block in move_block(blocks, 2, "down")] == ["p1", "l1", "h1"]


def test_list_item_operations() -> None:
    blocks = _blocks()

    changed = set_list_item(blocks, "l1", 1, "B")
    extended = add_list_item(changed, "l1")
    shortened = remove_list_item(extended, "l1", 0)

    assert changed[1].items == ["a", "B"]
    assert extended[1].items == ["a", "B", ""]
    assert shortened[1].items == ["B", ""]
    assert blocks[1].items == ["a", "b"]


def test_removing_last_list_item_leaves_one_blank_item() -> None:
    blocks = [ListBlock(id="l1", items=["only"])]

    updated = remove_list_item(blocks, "l1", 0)

    assert updated[0].items == [""]


def test_list_operations_ignore_non_list_blocks() -> None:
    blocks = _blocks()

    assert add_list_item(blocks, "p1") == blocks
    assert set_list_item(blocks, "l1", 10, "x") == blocks


def test_patching_list_items_to_empty_keeps_one_blank_item() -> None:
    blocks = [ListBlock(id="l1", items=["a"])]

    updated = update_block_fields(blocks, "l1", items=[])

    assert updated[0].items == [""]
    assert ListBlock(items=[]).items == [""]
