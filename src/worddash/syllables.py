"""
Heuristic syllable counting.

Counts groups of vowels after trimming common silent endings. The result is an
approximation good enough for readability scoring; it is not phonetically exact
("create" counts as one).
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Iterable, Pattern, Tuple

from .config import SyllableRules

DEFAULT_RULES = SyllableRules()


@lru_cache(maxsize=8)
def _compile(rules: SyllableRules) -> Tuple[Pattern[str], Pattern[str], Pattern[str]]:
    return (
        re.compile(rules.trailing_suffix_pattern),
        re.compile(rules.leading_pattern),
        re.compile(rules.vowel_group_pattern),
    )


def count_syllables(word: str, rules: SyllableRules = DEFAULT_RULES) -> int:
    """Estimate the syllables in a single word; never returns less than 1."""
    lowered = word.lower()
    if len(lowered) <= rules.short_word_length:
        return 1
    suffix_re, leading_re, vowel_re = _compile(rules)
    lowered = suffix_re.sub("", lowered, count=1)
    lowered = leading_re.sub("", lowered, count=1)
    groups = vowel_re.findall(lowered)
    return len(groups) or 1


def total_syllables(words: Iterable[str], rules: SyllableRules = DEFAULT_RULES) -> int:
    return sum(count_syllables(word, rules) for word in words)
