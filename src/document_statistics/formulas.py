"""
Readability and composition formulas over aggregated counts.

All functions are pure. Ratios use real division and round up; page count
and reading time use integer division.
"""

from __future__ import annotations

import math

WORDS_PER_PAGE = 250
WORDS_PER_MINUTE = 270


def page_count(words: int, words_per_page: int = WORDS_PER_PAGE) -> int:
    """Number of full pages the words fill."""
    return words // words_per_page


def reading_time(words: int, words_per_minute: int = WORDS_PER_MINUTE) -> int:
    """Reading time in whole minutes."""
    return words // words_per_minute


def complex_words_percent(total_words: int, long_words: int) -> int:
    """Percentage of long words, rounded up."""
    if total_words <= 0:
        return 0
    return math.ceil((long_words / total_words) * 100.0)


def lix(total_words: int, long_words: int, sentences: int) -> int:
    """LIX readability: average sentence length plus percentage of long words."""
    if total_words <= 0 or sentences <= 0:
        return 0
    return math.ceil(
        (total_words / sentences) + ((long_words / total_words) * 100.0)
    )


def coleman_liau(characters: int, words: int, sentences: int) -> int:
    """Coleman-Liau index, never below zero."""
    if words <= 0 or sentences <= 0:
        return 0
    cli = math.ceil(
        (5.88 * (characters / words)) - (29.6 * (sentences / words)) - 15.8
    )
    return max(cli, 0)
