from typing import List

import pytest

from document_statistics.config import StatisticsConfig
from document_statistics.segmenters import (
    PunctuationSentenceSegmenter,
    PunktSentenceSegmenter,
    SentenceSegmenter,
    UnicodeSentenceSegmenter,
    build_segmenter_from_config,
    create_segmenter,
)
from document_statistics.sentences import count_sentences


class FixedSegmenter(SentenceSegmenter):
    def __init__(self, boundaries: List[int]) -> None:
        self.boundaries = boundaries

    def segment(self, text: str) -> List[int]:
        return list(self.boundaries)


def test_empty_and_blank_text_has_no_sentences():
    segmenter = FixedSegmenter([1])
    assert count_sentences("", segmenter) == 0
    assert count_sentences("  \n ", segmenter) == 0


def test_whitespace_only_segments_are_skipped():
    assert count_sentences("Hi. Yo.", FixedSegmenter([3, 4, 7])) == 2


def test_single_character_sentences_count():
    assert count_sentences("A B", FixedSegmenter([1, 2, 3])) == 2


def test_non_advancing_boundaries_are_ignored():
    assert count_sentences("Hi. Yo.", FixedSegmenter([0, 3, 3, 7])) == 2


def test_text_is_trimmed_before_segmenting():
    class RecordingSegmenter(PunctuationSentenceSegmenter):
        def __init__(self) -> None:
            self.seen: List[str] = []

        def segment(self, text: str) -> List[int]:
            self.seen.append(text)
            return super().segment(text)

    segmenter = RecordingSegmenter()
    assert count_sentences("  One. Two.  \n", segmenter) == 2
    assert segmenter.seen == ["One. Two."]


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("One. Two. Three.", 3),
        ("A.", 1),
        ("Hello world", 1),
        ("Pi is 3.14 today. Yes!", 2),
        ("Wait... what?!", 2),
        ('"Stop." He left.', 2),
    ],
)
def test_punctuation_segmenter_counts(text, expected):
    assert count_sentences(text, PunctuationSentenceSegmenter()) == expected


def test_punctuation_segmenter_keeps_trailing_space_with_sentence():
    segmenter = PunctuationSentenceSegmenter()
    assert segmenter.segment("One. Two.") == [5, 9]
    assert segmenter.segment("") == []


def test_punkt_segmenter_boundaries():
    segmenter = PunktSentenceSegmenter()
    assert segmenter.segment("One. Two.") == [5, 9]
    assert segmenter.segment("") == []


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("One. Two. Three.", 3),
        ("Hello there. How are you today?", 2),
        ("No terminal punctuation here", 1),
    ],
)
def test_punkt_segmenter_counts(text, expected):
    assert count_sentences(text, PunktSentenceSegmenter()) == expected


def test_create_segmenter_by_name():
    assert isinstance(create_segmenter("unicode"), UnicodeSentenceSegmenter)
    assert isinstance(create_segmenter("UAX29"), UnicodeSentenceSegmenter)
    assert isinstance(create_segmenter(" Punkt "), PunktSentenceSegmenter)
    assert isinstance(create_segmenter("punctuation"), PunctuationSentenceSegmenter)
    with pytest.raises(ValueError):
        create_segmenter("icu")


def test_default_segmenter_follows_unicode_rules():
    assert isinstance(
        build_segmenter_from_config(StatisticsConfig()), UnicodeSentenceSegmenter
    )


def test_unicode_segmenter_boundaries():
    segmenter = UnicodeSentenceSegmenter()
    assert segmenter.segment("One. Two.") == [5, 9]
    assert segmenter.segment("Really?! Yes.") == [9, 13]
    assert segmenter.segment("") == []


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Wait... what?!", 1),
        ("e.g. this one", 1),
        ("A. B. C.", 3),
        ("One. Two. Three.", 3),
        ("Pi is 3.14 today. Yes!", 2),
        ("He said \"Stop.\" Then left.", 2),
        ("No terminal punctuation here", 1),
    ],
)
def test_default_segmenter_counts(text, expected):
    segmenter = build_segmenter_from_config(StatisticsConfig())
    assert count_sentences(text, segmenter) == expected
