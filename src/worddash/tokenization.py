from __future__ import annotations

import re
from typing import List

WHITESPACE_RE = re.compile(r"\s+", re.UNICODE)
SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
PARAGRAPH_SPLIT_RE = re.compile(r"\n{2,}")
NON_WORD_RE = re.compile(r"\W+", re.UNICODE)


def split_words(text: str) -> List[str]:
    """Split stripped text on whitespace runs, keeping punctuation attached."""
    trimmed = text.strip()
    if not trimmed:
        return []
    return WHITESPACE_RE.split(trimmed)


def split_sentences(text: str) -> List[str]:
    """Split text on runs of sentence-ending punctuation, dropping blank pieces."""
    return [segment for segment in SENTENCE_SPLIT_RE.split(text) if segment.strip()]


def split_paragraphs(text: str) -> List[str]:
    """Split text on blank lines (two or more newlines), dropping blank pieces."""
    return [segment for segment in PARAGRAPH_SPLIT_RE.split(text) if segment.strip()]


def strip_whitespace(text: str) -> str:
    return WHITESPACE_RE.sub("", text)


def normalize_keyword(word: str) -> str:
    """Lowercase a raw token and drop every non-word character."""
    return NON_WORD_RE.sub("", word.lower())
