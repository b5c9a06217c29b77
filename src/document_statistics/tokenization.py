from __future__ import annotations

from typing import NamedTuple

# Words longer than this count as "long" for LIX.
LONG_WORD_LENGTH = 6


class WordCounts(NamedTuple):
    """Word, long-word and word-character totals for a span of text."""

    words: int
    long_words: int
    alpha_numeric_characters: int


def count_words(text: str) -> WordCounts:
    """
    Count words in text with a character-classification state machine.

    Letters and digits build words. A single punctuation character inside a
    word (hyphen, apostrophe) is kept as part of it, while two in a row end
    the word. Trailing punctuation never counts toward word length.
    """
    words = 0
    long_words = 0
    alpha_numeric = 0

    in_word = False
    word_len = 0
    separator_run = 0

    for ch in text:
        if ch.isalnum():
            in_word = True
            separator_run = 0
            word_len += 1
            alpha_numeric += 1
        elif ch.isspace() and in_word:
            if separator_run > 0:
                word_len -= 1
                alpha_numeric -= 1
            words += 1
            if word_len > LONG_WORD_LENGTH:
                long_words += 1
            in_word = False
            word_len = 0
            separator_run = 0
        elif ch.isspace():
            continue
        else:
            separator_run += 1
            if not in_word:
                continue
            if separator_run > 1:
                # Double separators such as "--" split words.
                word_len -= 1
                alpha_numeric -= 1
                words += 1
                if word_len > LONG_WORD_LENGTH:
                    long_words += 1
                in_word = False
                word_len = 0
                separator_run = 0
            else:
                word_len += 1
                alpha_numeric += 1

    if in_word:
        if separator_run > 0:
            word_len -= 1
            alpha_numeric -= 1
        words += 1
        if word_len > LONG_WORD_LENGTH:
            long_words += 1

    return WordCounts(words, long_words, alpha_numeric)
