from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Iterable, Mapping, MutableMapping, Tuple

import yaml

from .tokenization import normalize_keyword

logger = logging.getLogger(__name__)

DEFAULT_STOPWORDS: frozenset[str] = frozenset(
    {
        "the",
        "is",
        "in",
        "at",
        "of",
        "on",
        "and",
        "a",
        "to",
        "it",
        "for",
        "with",
        "as",
        "was",
        "that",
        "this",
        "an",
        "be",
    }
)

# (minimum score, label); a score must be strictly greater than the minimum.
DEFAULT_READING_LEVELS: Tuple[Tuple[float, str], ...] = (
    (90.0, "Very Easy"),
    (80.0, "Easy"),
    (70.0, "Fairly Easy"),
    (60.0, "Standard"),
    (50.0, "Fairly Difficult"),
    (30.0, "Difficult"),
)


def _require_int(name: str, value: Any, minimum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}.")
    if value < minimum:
        raise ValueError(f"{name} must be at least {minimum}, got {value}.")


@dataclass(frozen=True, slots=True)
class SyllableRules:
    """Pattern data driving the vowel-group syllable heuristic."""

    short_word_length: int = 3
    trailing_suffix_pattern: str = r"(?:[^laeiouy]es|ed|[^laeiouy]e)$"
    leading_pattern: str = r"^y"
    vowel_group_pattern: str = r"[aeiouy]+"

    def __post_init__(self) -> None:
        _require_int("short_word_length", self.short_word_length, 0)
        for name in ("trailing_suffix_pattern", "leading_pattern", "vowel_group_pattern"):
            pattern = getattr(self, name)
            if not isinstance(pattern, str):
                raise ValueError(f"Syllable rule {name} must be a string, got {pattern!r}.")
            try:
                re.compile(pattern)
            except re.error as exc:
                raise ValueError(f"Invalid syllable rule {name}: {exc}") from exc


@dataclass(frozen=True, slots=True)
class AnalyzerConfig:
    """Configuration options for text analysis."""

    words_per_minute: int = 200
    top_keyword_limit: int = 5
    stopwords: frozenset[str] = DEFAULT_STOPWORDS
    syllables: SyllableRules = field(default_factory=SyllableRules)
    reading_levels: Tuple[Tuple[float, str], ...] = DEFAULT_READING_LEVELS
    fallback_reading_level: str = "Very Difficult"

    def __post_init__(self) -> None:
        _require_int("words_per_minute", self.words_per_minute, 1)
        _require_int("top_keyword_limit", self.top_keyword_limit, 0)
        if not isinstance(self.fallback_reading_level, str):
            raise ValueError("fallback_reading_level must be a string.")

    def to_dict(self) -> dict[str, Any]:
        """Return a YAML-safe dictionary representation of the configuration."""
        return {
            "words_per_minute": self.words_per_minute,
            "top_keyword_limit": self.top_keyword_limit,
            "stopwords": sorted(self.stopwords),
            "syllables": {
                f.name: getattr(self.syllables, f.name) for f in fields(SyllableRules)
            },
            "reading_levels": [
                {"min_score": score, "label": label}
                for score, label in self.reading_levels
            ],
            "fallback_reading_level": self.fallback_reading_level,
        }


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {f.name for f in fields(AnalyzerConfig)}
    ignored = sorted(str(key) for key in data if key not in allowed)
    if ignored:
        logger.warning("Ignoring unknown configuration keys: %s", ", ".join(ignored))
    kwargs = {key: data[key] for key in data if key in allowed}
    if "stopwords" in kwargs:
        kwargs["stopwords"] = _build_stopwords(kwargs["stopwords"])
    if "syllables" in kwargs:
        kwargs["syllables"] = _build_syllable_rules(kwargs["syllables"])
    if "reading_levels" in kwargs:
        kwargs["reading_levels"] = _build_reading_levels(kwargs["reading_levels"])
    return kwargs


def _build_stopwords(value: Any) -> frozenset[str]:
    if isinstance(value, str) or not isinstance(value, Iterable):
        raise ValueError("stopwords must be a list of words.")
    normalized = (normalize_keyword(str(word)) for word in value)
    return frozenset(word for word in normalized if word)


def _build_syllable_rules(value: Any) -> SyllableRules:
    if isinstance(value, SyllableRules):
        return value
    if not isinstance(value, Mapping):
        raise ValueError("syllables must be a mapping of rule names to values.")
    allowed = {f.name for f in fields(SyllableRules)}
    filtered = {key: value[key] for key in value if key in allowed}
    return SyllableRules(**filtered)


def _build_reading_levels(value: Any) -> Tuple[Tuple[float, str], ...]:
    if isinstance(value, str) or not isinstance(value, Iterable):
        raise ValueError("reading_levels must be a list of thresholds.")
    levels: list[Tuple[float, str]] = []
    for entry in value:
        if isinstance(entry, Mapping):
            if "min_score" not in entry or "label" not in entry:
                raise ValueError("reading_levels entries need min_score and label.")
            score, label = entry["min_score"], entry["label"]
        else:
            try:
                score, label = entry
            except (TypeError, ValueError) as exc:
                raise ValueError(
                    f"reading_levels entry {entry!r} is not a (min_score, label) pair."
                ) from exc
        try:
            levels.append((float(score), str(label)))
        except (TypeError, ValueError) as exc:
            raise ValueError(f"reading_levels min_score {score!r} is not a number.") from exc
    levels.sort(key=lambda item: item[0], reverse=True)
    return tuple(levels)


def config_from_dict(data: Mapping[str, Any] | None) -> AnalyzerConfig:
    """Build an AnalyzerConfig from a dictionary-like input."""
    if data is None:
        return AnalyzerConfig()
    return AnalyzerConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> AnalyzerConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> AnalyzerConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return AnalyzerConfig()
    return config_from_yaml(path)
