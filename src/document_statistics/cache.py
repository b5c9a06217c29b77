from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from .models import BlockStats


class BlockStatsCache:
    """Arena of per-block statistics keyed by stable block identity."""

    def __init__(self) -> None:
        self._records: Dict[int, BlockStats] = {}

    def get(self, block_id: int) -> BlockStats | None:
        return self._records.get(block_id)

    def get_or_create(self, block_id: int) -> BlockStats:
        """Return the record for block_id, creating an empty one on first access."""
        record = self._records.get(block_id)
        if record is None:
            record = BlockStats()
            self._records[block_id] = record
        return record

    def discard(self, block_id: int) -> BlockStats | None:
        return self._records.pop(block_id, None)

    def retain(self, block_ids: Iterable[int]) -> List[Tuple[int, BlockStats]]:
        """Keep only the given blocks and return the records that were dropped."""
        keep = set(block_ids)
        dropped = [
            (block_id, record)
            for block_id, record in self._records.items()
            if block_id not in keep
        ]
        for block_id, _ in dropped:
            del self._records[block_id]
        return dropped

    def clear(self) -> None:
        self._records.clear()

    def __contains__(self, block_id: object) -> bool:
        return block_id in self._records

    def __len__(self) -> int:
        return len(self._records)
