from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List

from . import formulas
from .cache import BlockStatsCache
from .config import StatisticsConfig
from .document import CLEARED, CONTENTS_CHANGED, Block, TextDocument
from .events import EventEmitter, Listener
from .models import PUBLISHED_FIELDS, BlockStats, StatisticsSnapshot
from .segmenters import SentenceSegmenter, build_segmenter_from_config
from .sentences import count_sentences
from .tokenization import count_words

logger = logging.getLogger(__name__)

SNAPSHOT_EVENT = "snapshot"
TOTAL_WORD_COUNT = "total_word_count"


@dataclass(slots=True)
class _RunningTotals:
    word_count: int = 0
    long_word_count: int = 0
    alpha_numeric_character_count: int = 0
    sentence_count: int = 0
    paragraph_count: int = 0

    def add(self, stats: BlockStats, sign: int = 1) -> None:
        self.word_count += sign * stats.word_count
        self.long_word_count += sign * stats.long_word_count
        self.alpha_numeric_character_count += sign * stats.alpha_numeric_character_count
        self.sentence_count += sign * stats.sentence_count
        if stats.is_paragraph:
            self.paragraph_count += sign

    def subtract(self, stats: BlockStats) -> None:
        self.add(stats, sign=-1)

    def reset(self) -> None:
        self.word_count = 0
        self.long_word_count = 0
        self.alpha_numeric_character_count = 0
        self.sentence_count = 0
        self.paragraph_count = 0


class DocumentStatistics:
    """
    Keeps live statistics for a TextDocument.

    Per-block counts are cached by block id and folded into running totals.
    After an edit only the blocks touched by the edit (plus blocks never seen
    before) are recomputed, unless the configuration asks for a full rescan.
    Every recompute publishes a StatisticsSnapshot to subscribers, followed
    by one notification per published field.
    """

    def __init__(
        self,
        document: TextDocument,
        segmenter: SentenceSegmenter | None = None,
        config: StatisticsConfig | None = None,
    ) -> None:
        self._document = document
        self._config = config or StatisticsConfig()
        self._segmenter = segmenter or build_segmenter_from_config(self._config)
        self._cache = BlockStatsCache()
        self._totals = _RunningTotals()
        self._events = EventEmitter()
        self._current = StatisticsSnapshot()
        self._selection_active = False

    # Wiring -------------------------------------------------------------

    def attach(self) -> StatisticsSnapshot:
        """Listen to the document's notifications and compute initial statistics."""
        self._document.subscribe(CONTENTS_CHANGED, self.on_document_changed)
        self._document.subscribe(CLEARED, self.on_document_cleared)
        return self.rescan()

    def detach(self) -> None:
        self._document.unsubscribe(CONTENTS_CHANGED, self.on_document_changed)
        self._document.unsubscribe(CLEARED, self.on_document_cleared)

    def subscribe(self, field: str, callback: Listener) -> None:
        """Receive the new value of one published field after every recompute."""
        if field not in PUBLISHED_FIELDS and field != TOTAL_WORD_COUNT:
            raise ValueError(f"Unknown statistics field '{field}'.")
        self._events.subscribe(field, callback)

    def subscribe_snapshot(self, callback: Listener) -> None:
        self._events.subscribe(SNAPSHOT_EVENT, callback)

    def unsubscribe(self, field: str, callback: Listener) -> None:
        self._events.unsubscribe(field, callback)

    def unsubscribe_snapshot(self, callback: Listener) -> None:
        self._events.unsubscribe(SNAPSHOT_EVENT, callback)

    # State --------------------------------------------------------------

    @property
    def snapshot(self) -> StatisticsSnapshot:
        """Whole-document statistics from the cached totals."""
        return self._document_snapshot()

    @property
    def current(self) -> StatisticsSnapshot:
        """The last published snapshot (selection-scoped while a selection is active)."""
        return self._current

    @property
    def selection_active(self) -> bool:
        return self._selection_active

    def block_stats(self, block: Block) -> BlockStats | None:
        return self._cache.get(block.block_id)

    # Handlers -----------------------------------------------------------

    def on_document_changed(
        self, position: int, chars_removed: int, chars_added: int
    ) -> StatisticsSnapshot:
        """Recompute statistics after the document changed at position."""
        self._selection_active = False
        if not self._config.incremental:
            return self.rescan()

        dirty: Dict[int, Block] = {}
        live_ids: List[int] = []
        for block in self._document.blocks():
            live_ids.append(block.block_id)
            if block.block_id not in self._cache:
                dirty[block.block_id] = block

        dropped = self._cache.retain(live_ids)
        for _, record in dropped:
            self._totals.subtract(record)

        for block in self._document.blocks_between(position, position + chars_added):
            dirty[block.block_id] = block
        for block in dirty.values():
            self._update_block(block)

        logger.debug(
            "Edit at %s (-%s/+%s): recomputed %s block(s), dropped %s",
            position,
            chars_removed,
            chars_added,
            len(dirty),
            len(dropped),
        )
        return self._publish(self._document_snapshot())

    def on_document_cleared(self) -> StatisticsSnapshot:
        self._selection_active = False
        self._totals.reset()
        self._cache.clear()
        return self._publish(self._document_snapshot())

    def on_selection_changed(
        self, selected_text: str, selection_start: int, selection_end: int
    ) -> StatisticsSnapshot:
        """Publish statistics for the selected text only."""
        words, long_words, alpha_numeric = count_words(selected_text)
        sentences = count_sentences(selected_text, self._segmenter)

        paragraphs = 0
        for block in self._document.blocks_between(selection_start, selection_end):
            if block.block_id in self._cache and block.text.strip():
                paragraphs += 1

        logger.debug(
            "Selection %s-%s: %s words, %s paragraph(s)",
            selection_start,
            selection_end,
            words,
            paragraphs,
        )
        self._selection_active = True
        return self._publish(
            self._build_snapshot(
                words=words,
                long_words=long_words,
                characters=alpha_numeric,
                sentences=sentences,
                paragraphs=paragraphs,
                character_count=len(selected_text),
                total_word_count=self._totals.word_count,
                is_selection=True,
            )
        )

    def on_selection_cleared(self) -> StatisticsSnapshot:
        self._selection_active = False
        return self._publish(self._document_snapshot())

    def select_range(self, start: int, end: int) -> StatisticsSnapshot:
        """Select the document text between two offsets."""
        start, end = min(start, end), max(start, end)
        return self.on_selection_changed(self._document.text()[start:end], start, end)

    def rescan(self) -> StatisticsSnapshot:
        """Recompute every block from the first to the last and publish."""
        self._selection_active = False
        self._totals.reset()
        live_ids: List[int] = []
        for block in self._document.blocks():
            live_ids.append(block.block_id)
            self._totals.add(self._compute_block(block))
        self._cache.retain(live_ids)
        logger.debug("Full rescan of %s block(s)", len(live_ids))
        return self._publish(self._document_snapshot())

    # Internals ----------------------------------------------------------

    def _update_block(self, block: Block) -> None:
        """Recompute one block and fold the difference into the totals."""
        previous = self._cache.get(block.block_id)
        if previous is not None:
            self._totals.subtract(previous)
        self._totals.add(self._compute_block(block))

    def _compute_block(self, block: Block) -> BlockStats:
        """Overwrite the block's cached record with fresh counts."""
        record = self._cache.get_or_create(block.block_id)
        (
            record.word_count,
            record.long_word_count,
            record.alpha_numeric_character_count,
        ) = count_words(block.text)
        record.sentence_count = count_sentences(block.text, self._segmenter)
        record.is_paragraph = bool(block.text.strip())
        return record

    def _document_snapshot(self) -> StatisticsSnapshot:
        totals = self._totals
        return self._build_snapshot(
            words=totals.word_count,
            long_words=totals.long_word_count,
            characters=totals.alpha_numeric_character_count,
            sentences=totals.sentence_count,
            paragraphs=totals.paragraph_count,
            character_count=self._document.character_count(),
            total_word_count=totals.word_count,
            is_selection=False,
        )

    def _build_snapshot(
        self,
        *,
        words: int,
        long_words: int,
        characters: int,
        sentences: int,
        paragraphs: int,
        character_count: int,
        total_word_count: int,
        is_selection: bool,
    ) -> StatisticsSnapshot:
        return StatisticsSnapshot(
            word_count=words,
            total_word_count=total_word_count,
            character_count=character_count,
            sentence_count=sentences,
            paragraph_count=paragraphs,
            page_count=formulas.page_count(words, self._config.words_per_page),
            lix_long_word_count=long_words,
            complex_words_percent=formulas.complex_words_percent(words, long_words),
            reading_time_minutes=formulas.reading_time(
                words, self._config.words_per_minute
            ),
            lix_score=formulas.lix(words, long_words, sentences),
            coleman_liau_score=formulas.coleman_liau(characters, words, sentences),
            is_selection=is_selection,
        )

    def _publish(self, snapshot: StatisticsSnapshot) -> StatisticsSnapshot:
        self._current = snapshot
        self._events.emit(SNAPSHOT_EVENT, snapshot)
        for field in PUBLISHED_FIELDS:
            self._events.emit(field, getattr(snapshot, field))
        if not snapshot.is_selection:
            self._events.emit(TOTAL_WORD_COUNT, snapshot.total_word_count)
        return snapshot
