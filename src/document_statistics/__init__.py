"""
document_statistics package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .aggregator import DocumentStatistics
from .config import StatisticsConfig, config_from_dict, config_from_yaml, load_config
from .document import Block, TextDocument
from .models import BlockStats, StatisticsSnapshot
from .segmenters import build_segmenter_from_config, create_segmenter
from .sentences import count_sentences
from .tokenization import WordCounts, count_words

__all__ = [
    "Block",
    "BlockStats",
    "DocumentStatistics",
    "StatisticsConfig",
    "StatisticsSnapshot",
    "TextDocument",
    "WordCounts",
    "build_segmenter_from_config",
    "config_from_dict",
    "config_from_yaml",
    "count_sentences",
    "count_words",
    "create_segmenter",
    "load_config",
]

__version__ = "0.1.0"
