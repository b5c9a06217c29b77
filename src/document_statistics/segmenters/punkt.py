from __future__ import annotations

from typing import Any, List

from nltk.tokenize.punkt import PunktSentenceTokenizer

from .base import SentenceSegmenter


class PunktSentenceSegmenter(SentenceSegmenter):
    """
    Segmenter backed by nltk's Punkt tokenizer.

    An untrained tokenizer is used by default so no corpus download is
    required. Whitespace between two Punkt spans is attached to the
    preceding sentence.
    """

    name = "punkt"

    def __init__(self, tokenizer: Any | None = None) -> None:
        self._tokenizer = tokenizer or PunktSentenceTokenizer()

    def segment(self, text: str) -> List[int]:
        if not text:
            return []
        spans = list(self._tokenizer.span_tokenize(text))
        boundaries = [start for start, _ in spans[1:] if start > 0]
        boundaries.append(len(text))
        return sorted(set(boundaries))
