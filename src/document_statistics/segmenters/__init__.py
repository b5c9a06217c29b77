from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .base import SentenceSegmenter
from .punctuation import PunctuationSentenceSegmenter
from .punkt import PunktSentenceSegmenter
from .unicode import UnicodeSentenceSegmenter

if TYPE_CHECKING:  # pragma: no cover - import for typing only
    from ..config import StatisticsConfig

__all__ = [
    "SentenceSegmenter",
    "PunctuationSentenceSegmenter",
    "PunktSentenceSegmenter",
    "UnicodeSentenceSegmenter",
    "create_segmenter",
    "build_segmenter_from_config",
]


def create_segmenter(name: str, **kwargs: Any) -> SentenceSegmenter:
    """Factory for building sentence segmenters by name."""
    normalized = name.lower().strip()
    if normalized in {"unicode", "uax29", "uniseg"}:
        return UnicodeSentenceSegmenter()
    if normalized in {"punkt", "nltk"}:
        return PunktSentenceSegmenter(**kwargs)
    if normalized in {"punctuation", "simple"}:
        return PunctuationSentenceSegmenter()
    raise ValueError(f"Unknown sentence segmenter '{name}'.")


def build_segmenter_from_config(config: "StatisticsConfig") -> SentenceSegmenter:
    """Convenience helper to build a segmenter from StatisticsConfig."""
    return create_segmenter(config.segmenter)
