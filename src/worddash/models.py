from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator


@dataclass(frozen=True, slots=True)
class KeywordCount:
    """A normalized keyword and how many times it appeared."""

    word: str
    count: int

    def __iter__(self) -> Iterator[Any]:
        yield self.word
        yield self.count


@dataclass(frozen=True, slots=True)
class TextStatistics:
    """Statistics derived from a single input text."""

    word_count: int = 0
    char_count: int = 0
    char_count_no_spaces: int = 0
    reading_time_minutes: int = 0
    sentence_count: int = 0
    paragraph_count: int = 0
    longest_word: str = ""
    average_word_length: float = 0.0
    top_keywords: tuple[KeywordCount, ...] = field(default_factory=tuple)
    reading_level: str = ""
    syllable_count: int = 0
    readability_score: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable mapping keyed the way the page names them."""
        return {
            "wordCount": self.word_count,
            "charCount": self.char_count,
            "charCountNoSpaces": self.char_count_no_spaces,
            "readingTimeMinutes": self.reading_time_minutes,
            "sentenceCount": self.sentence_count,
            "paragraphCount": self.paragraph_count,
            "longestWord": self.longest_word,
            "averageWordLength": self.average_word_length,
            "topKeywords": [[kw.word, kw.count] for kw in self.top_keywords],
            "readingLevel": self.reading_level,
            "syllableCount": self.syllable_count,
            "readabilityScore": self.readability_score,
        }
