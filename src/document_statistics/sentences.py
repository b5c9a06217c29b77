from __future__ import annotations

from .segmenters import SentenceSegmenter


def count_sentences(text: str, segmenter: SentenceSegmenter) -> int:
    """Count sentences in text using the segmenter's boundary offsets."""
    trimmed = text.strip()
    if not trimmed:
        return 0

    count = 0
    previous = 0
    for boundary in segmenter.segment(trimmed):
        if boundary <= previous:
            continue
        segment = trimmed[previous:boundary]
        # Lone whitespace between sentences is not a sentence.
        if len(segment) > 1 or not segment.isspace():
            count += 1
        previous = boundary
    return count
