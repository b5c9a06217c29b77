from __future__ import annotations

from typing import List

from uniseg.sentencebreak import sentence_boundaries

from .base import SentenceSegmenter


class UnicodeSentenceSegmenter(SentenceSegmenter):
    """
    Segmenter following the Unicode sentence-boundary rules (UAX #29).

    Trailing spaces and closing punctuation stay with the sentence they end,
    and runs such as "?!" or "..." followed by a lowercase word do not break.
    """

    name = "unicode"

    def segment(self, text: str) -> List[int]:
        if not text:
            return []
        return [offset for offset in sentence_boundaries(text) if offset > 0]
