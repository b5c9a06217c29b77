from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List


class SentenceSegmenter(ABC):
    """Abstract sentence-boundary finder used by the sentence counter."""

    name: str = "base"

    @abstractmethod
    def segment(self, text: str) -> List[int]:
        """
        Return the end offset of every sentence segment in text.

        Offsets are strictly increasing and the last one equals len(text).
        Empty text yields an empty list.
        """
        raise NotImplementedError
