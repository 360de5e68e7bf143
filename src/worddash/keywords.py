from __future__ import annotations

from collections import Counter
from typing import AbstractSet, Iterable, List

from .config import DEFAULT_STOPWORDS
from .models import KeywordCount
from .tokenization import normalize_keyword


def keyword_frequencies(
    words: Iterable[str], stopwords: AbstractSet[str] = DEFAULT_STOPWORDS
) -> Counter[str]:
    """Tally normalized, non-stopword tokens in first-appearance order."""
    counts: Counter[str] = Counter()
    for word in words:
        normalized = normalize_keyword(word)
        if normalized and normalized not in stopwords:
            counts[normalized] += 1
    return counts


def top_keywords(
    words: Iterable[str],
    stopwords: AbstractSet[str] = DEFAULT_STOPWORDS,
    limit: int = 5,
) -> List[KeywordCount]:
    """Return the most frequent keywords; ties keep first-appearance order."""
    if limit <= 0:
        return []
    counts = keyword_frequencies(words, stopwords)
    # most_common is a stable sort on insertion order for equal counts.
    return [KeywordCount(word=word, count=count) for word, count in counts.most_common(limit)]
