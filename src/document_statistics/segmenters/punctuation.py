from __future__ import annotations

import re
from typing import List

from .base import SentenceSegmenter

# Terminal punctuation, optional closing quotes/brackets, then whitespace or end.
SENTENCE_END_RE = re.compile(r"[.?!]+[\"'\)\]’”]*(?:\s+|$)", re.UNICODE)


class PunctuationSentenceSegmenter(SentenceSegmenter):
    """
    Heuristic segmenter that breaks after terminal punctuation.

    Whitespace following a terminator stays with the sentence it ends, so
    "One. Two." segments as "One. " and "Two.". Terminators directly followed
    by a non-space character (decimals, "e.g.x") do not break.
    """

    name = "punctuation"

    def segment(self, text: str) -> List[int]:
        if not text:
            return []
        boundaries: List[int] = []
        for match in SENTENCE_END_RE.finditer(text):
            end = match.end()
            if end > 0 and (not boundaries or end > boundaries[-1]):
                boundaries.append(end)
        if not boundaries or boundaries[-1] != len(text):
            boundaries.append(len(text))
        return boundaries
