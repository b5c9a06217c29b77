from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import Dict, Iterator, List

from .events import EventEmitter, Listener

BLOCK_SEPARATOR = "\n"

CONTENTS_CHANGED = "contents_changed"
CLEARED = "cleared"


@dataclass(slots=True)
class Block:
    """A paragraph of the document with a stable identity."""

    block_id: int
    text: str
    position: int = 0

    @property
    def end(self) -> int:
        """Offset just past the block's last character."""
        return self.position + len(self.text)


class TextDocument:
    """
    In-memory text store split into blocks at newline characters.

    Edits keep the identity of the block where they start; blocks created by
    inserted newlines get fresh ids and blocks merged away by a removal are
    destroyed. Every edit emits ``contents_changed`` with
    ``(position, chars_removed, chars_added)``; ``clear`` emits ``cleared``.
    """

    def __init__(self, text: str = "") -> None:
        self._events = EventEmitter()
        self._next_id = 0
        self._blocks: List[Block] = []
        self._starts: List[int] = []
        self._index: Dict[int, int] = {}
        self._blocks = [self._new_block(part) for part in text.split(BLOCK_SEPARATOR)]
        self._reindex()

    # Events -------------------------------------------------------------

    def subscribe(self, event: str, callback: Listener) -> None:
        self._events.subscribe(event, callback)

    def unsubscribe(self, event: str, callback: Listener) -> None:
        self._events.unsubscribe(event, callback)

    # Content ------------------------------------------------------------

    def text(self) -> str:
        return BLOCK_SEPARATOR.join(block.text for block in self._blocks)

    def character_count(self) -> int:
        """Characters in text(), block separators included."""
        return self._blocks[-1].end

    def set_text(self, text: str) -> None:
        """Replace the whole content with new blocks."""
        removed = self.character_count()
        self._blocks = [self._new_block(part) for part in text.split(BLOCK_SEPARATOR)]
        self._reindex()
        self._events.emit(CONTENTS_CHANGED, 0, removed, len(text))

    def clear(self) -> None:
        """Drop all content, leaving a single empty block."""
        self._blocks = [self._new_block("")]
        self._reindex()
        self._events.emit(CLEARED)

    def insert(self, position: int, text: str) -> None:
        self.replace(position, 0, text)

    def remove(self, position: int, count: int) -> None:
        self.replace(position, count, "")

    def replace(self, position: int, count: int, text: str) -> None:
        """Replace count characters at position with text."""
        length = self.character_count()
        if position < 0 or count < 0 or position + count > length:
            raise IndexError(
                f"Edit range {position}+{count} outside document of length {length}."
            )
        first_idx = self._index_at(position)
        last_idx = self._index_at(position + count)
        first = self._blocks[first_idx]
        last = self._blocks[last_idx]
        head = first.text[: position - first.position]
        tail = last.text[position + count - last.position :]
        parts = (head + text + tail).split(BLOCK_SEPARATOR)

        first.text = parts[0]
        created = [self._new_block(part) for part in parts[1:]]
        self._blocks[first_idx + 1 : last_idx + 1] = created
        self._reindex()
        self._events.emit(CONTENTS_CHANGED, position, count, len(text))

    # Blocks -------------------------------------------------------------

    def blocks(self) -> Iterator[Block]:
        return iter(self._blocks)

    def block_count(self) -> int:
        return len(self._blocks)

    def first_block(self) -> Block:
        return self._blocks[0]

    def last_block(self) -> Block:
        return self._blocks[-1]

    def next_block(self, block: Block) -> Block | None:
        idx = self._index[block.block_id] + 1
        return self._blocks[idx] if idx < len(self._blocks) else None

    def get_block(self, block_id: int) -> Block | None:
        idx = self._index.get(block_id)
        return self._blocks[idx] if idx is not None else None

    def find_block(self, offset: int) -> Block:
        """Return the block containing offset; out-of-range offsets are clamped."""
        return self._blocks[self._index_at(offset)]

    def blocks_between(self, start: int, end: int) -> List[Block]:
        """Blocks from the one containing start through the one containing end."""
        first = self._index_at(start)
        last = self._index_at(end)
        return self._blocks[first : last + 1]

    def _index_at(self, offset: int) -> int:
        return max(0, bisect_right(self._starts, offset) - 1)

    def _new_block(self, text: str) -> Block:
        block = Block(block_id=self._next_id, text=text)
        self._next_id += 1
        return block

    def _reindex(self) -> None:
        position = 0
        self._starts = []
        self._index = {}
        for idx, block in enumerate(self._blocks):
            block.position = position
            self._starts.append(position)
            self._index[block.block_id] = idx
            position = block.end + len(BLOCK_SEPARATOR)
