"""
worddash package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .analyzer import analyze
from .config import (
    AnalyzerConfig,
    SyllableRules,
    config_from_dict,
    config_from_yaml,
    load_config,
)
from .export import export_text
from .models import KeywordCount, TextStatistics
from .report import render_report

__all__ = [
    "AnalyzerConfig",
    "KeywordCount",
    "SyllableRules",
    "TextStatistics",
    "analyze",
    "config_from_dict",
    "config_from_yaml",
    "export_text",
    "load_config",
    "render_report",
]

__version__ = "0.1.0"
