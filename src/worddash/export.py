from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_EXPORT_NAME = "worddash-text.txt"


def export_text(text: str, destination: str | Path) -> Path:
    """
    Write the raw input text to disk as UTF-8 with no header or trailer.

    Parameters
    ----------
    text:
        The unanalyzed input, written byte-for-byte after UTF-8 encoding.
    destination:
        A file path, or an existing directory in which DEFAULT_EXPORT_NAME is created.
    """
    path = Path(destination)
    if path.is_dir():
        path = path / DEFAULT_EXPORT_NAME
    path.parent.mkdir(parents=True, exist_ok=True)
    # newline="" keeps "\r\n" in the input from being rewritten on Windows.
    with path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(text)
    logger.info("Exported %d characters to %s", len(text), path)
    return path
