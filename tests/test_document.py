from typing import Any, List, Tuple

import pytest

from document_statistics.document import CLEARED, CONTENTS_CHANGED, TextDocument


def _record_changes(doc: TextDocument) -> List[Tuple[Any, ...]]:
    events: List[Tuple[Any, ...]] = []
    doc.subscribe(CONTENTS_CHANGED, lambda *args: events.append(args))
    doc.subscribe(CLEARED, lambda: events.append(("cleared",)))
    return events


def test_blocks_split_on_newlines():
    doc = TextDocument("First.\n\nThird.")
    assert [block.text for block in doc.blocks()] == ["First.", "", "Third."]
    assert [block.position for block in doc.blocks()] == [0, 7, 8]
    assert doc.character_count() == len("First.\n\nThird.")
    assert doc.text() == "First.\n\nThird."


def test_empty_document_has_one_empty_block():
    doc = TextDocument()
    assert doc.block_count() == 1
    assert doc.first_block() is doc.last_block()
    assert doc.character_count() == 0


def test_find_block_and_navigation():
    doc = TextDocument("ab\ncd\nef")
    first, second, third = list(doc.blocks())
    assert doc.find_block(0) is first
    # The separator belongs to the block it terminates.
    assert doc.find_block(2) is first
    assert doc.find_block(3) is second
    assert doc.find_block(100) is third
    assert doc.next_block(first) is second
    assert doc.next_block(third) is None
    assert doc.blocks_between(1, 4) == [first, second]
    assert doc.get_block(second.block_id) is second


def test_insert_newline_keeps_identity_of_edited_block():
    doc = TextDocument("hello world")
    original = doc.first_block()
    events = _record_changes(doc)

    doc.insert(5, "\n")

    assert [block.text for block in doc.blocks()] == ["hello", " world"]
    assert doc.first_block() is original
    assert doc.last_block().block_id != original.block_id
    assert events == [(5, 0, 1)]


def test_remove_across_blocks_merges_them():
    doc = TextDocument("ab\ncd\nef")
    first, second, third = list(doc.blocks())
    events = _record_changes(doc)

    doc.remove(1, 3)

    assert doc.text() == "ad\nef"
    assert doc.first_block() is first
    assert doc.get_block(second.block_id) is None
    assert doc.last_block() is third
    assert third.position == 3
    assert events == [(1, 3, 0)]


def test_replace_reports_both_lengths():
    doc = TextDocument("The cat sat.")
    events = _record_changes(doc)
    doc.replace(4, 3, "dog")
    assert doc.text() == "The dog sat."
    assert events == [(4, 3, 3)]


def test_set_text_and_clear_emit_notifications():
    doc = TextDocument("old")
    events = _record_changes(doc)
    doc.set_text("new text\nhere")
    doc.clear()
    assert events == [(0, 3, 13), ("cleared",)]
    assert doc.text() == ""
    assert doc.block_count() == 1


def test_edits_outside_document_raise():
    doc = TextDocument("short")
    with pytest.raises(IndexError):
        doc.insert(6, "x")
    with pytest.raises(IndexError):
        doc.remove(3, 5)
    with pytest.raises(IndexError):
        doc.remove(-1, 1)


def test_unsubscribe_stops_notifications():
    doc = TextDocument("text")
    events: List[Tuple[Any, ...]] = []

    def listener(*args: Any) -> None:
        events.append(args)

    doc.subscribe(CONTENTS_CHANGED, listener)
    doc.insert(0, "a")
    doc.unsubscribe(CONTENTS_CHANGED, listener)
    doc.insert(0, "b")
    assert events == [(0, 0, 1)]
