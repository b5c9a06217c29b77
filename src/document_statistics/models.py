from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(slots=True)
class BlockStats:
    """Cached counts for a single document block (paragraph)."""

    word_count: int = 0
    long_word_count: int = 0
    alpha_numeric_character_count: int = 0
    sentence_count: int = 0
    is_paragraph: bool = False


@dataclass(frozen=True, slots=True)
class StatisticsSnapshot:
    """Statistics published after every recompute, for a document or a selection."""

    word_count: int = 0
    total_word_count: int = 0
    character_count: int = 0
    sentence_count: int = 0
    paragraph_count: int = 0
    page_count: int = 0
    lix_long_word_count: int = 0
    complex_words_percent: int = 0
    reading_time_minutes: int = 0
    lix_score: int = 0
    coleman_liau_score: int = 0
    is_selection: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly dictionary of the snapshot."""
        return dict(asdict(self))


# Fields emitted as individual notifications on every publish.
PUBLISHED_FIELDS = (
    "word_count",
    "character_count",
    "sentence_count",
    "paragraph_count",
    "page_count",
    "complex_words_percent",
    "reading_time_minutes",
    "lix_score",
    "coleman_liau_score",
)
