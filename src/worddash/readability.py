from __future__ import annotations

from typing import Sequence, Tuple

from .config import DEFAULT_READING_LEVELS

FLESCH_BASE = 206.835
SENTENCE_LENGTH_WEIGHT = 1.015
SYLLABLE_WEIGHT = 84.6


def flesch_reading_ease(word_count: int, sentence_count: int, syllable_count: int) -> float:
    """
    Simplified Flesch Reading Ease score.

    Zero sentence or word counts fall back to a divisor of 1 so the score is
    always finite.
    """
    words_per_sentence = word_count / max(sentence_count, 1)
    syllables_per_word = syllable_count / max(word_count, 1)
    return (
        FLESCH_BASE
        - SENTENCE_LENGTH_WEIGHT * words_per_sentence
        - SYLLABLE_WEIGHT * syllables_per_word
    )


def reading_level(
    score: float,
    levels: Sequence[Tuple[float, str]] = DEFAULT_READING_LEVELS,
    fallback: str = "Very Difficult",
) -> str:
    """Map a score to the first label whose minimum it strictly exceeds."""
    for minimum, label in levels:
        if score > minimum:
            return label
    return fallback
