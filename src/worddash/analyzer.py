from __future__ import annotations

import logging
import math

from .config import AnalyzerConfig
from .keywords import top_keywords
from .models import TextStatistics
from .readability import flesch_reading_ease, reading_level
from .syllables import total_syllables
from .tokenization import split_paragraphs, split_sentences, split_words, strip_whitespace

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = AnalyzerConfig()


def analyze(text: str, config: AnalyzerConfig | None = None) -> TextStatistics:
    """Compute every text statistic for the input in one call."""
    cfg = config or DEFAULT_CONFIG
    words = split_words(text)
    word_count = len(words)
    sentence_count = len(split_sentences(text))

    # Longest word and average length use raw tokens, punctuation included.
    longest = ""
    for word in words:
        if len(word) > len(longest):
            longest = word
    average = round(sum(len(word) for word in words) / word_count, 2) if words else 0.0

    syllable_count = total_syllables(words, cfg.syllables)
    score = flesch_reading_ease(word_count, sentence_count, syllable_count)

    stats = TextStatistics(
        word_count=word_count,
        char_count=len(text),
        char_count_no_spaces=len(strip_whitespace(text)),
        reading_time_minutes=math.ceil(word_count / cfg.words_per_minute),
        sentence_count=sentence_count,
        paragraph_count=len(split_paragraphs(text)),
        longest_word=longest,
        average_word_length=average,
        top_keywords=tuple(top_keywords(words, cfg.stopwords, cfg.top_keyword_limit)),
        reading_level=reading_level(
            score, cfg.reading_levels, cfg.fallback_reading_level
        ),
        syllable_count=syllable_count,
        readability_score=score,
    )
    logger.debug(
        "Analyzed %d chars: words=%d sentences=%d score=%.2f level=%s",
        stats.char_count,
        word_count,
        sentence_count,
        score,
        stats.reading_level,
    )
    return stats
