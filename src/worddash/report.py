from __future__ import annotations

from typing import List, Tuple

from .models import TextStatistics

NO_KEYWORDS_MESSAGE = "No significant keywords found."


def stat_rows(stats: TextStatistics) -> List[Tuple[str, str]]:
    """Return the labelled values shown in the statistics panel, in display order."""
    return [
        ("Words", str(stats.word_count)),
        ("Characters", str(stats.char_count)),
        ("Characters (No Spaces)", str(stats.char_count_no_spaces)),
        ("Sentences", str(stats.sentence_count)),
        ("Paragraphs", str(stats.paragraph_count)),
        ("Reading Time", f"{stats.reading_time_minutes} min"),
        ("Longest Word", stats.longest_word or "-"),
        ("Avg. Word Length", f"{stats.average_word_length:.2f}"),
        ("Reading Level", stats.reading_level),
    ]


def render_report(stats: TextStatistics) -> str:
    """Render statistics as a plain-text panel followed by the keyword list."""
    rows = stat_rows(stats)
    width = max(len(label) for label, _ in rows)
    lines = [f"{label.ljust(width)}  {value}" for label, value in rows]
    lines.append("")
    lines.append("Top Keywords")
    if stats.top_keywords:
        for keyword in stats.top_keywords:
            suffix = "s" if keyword.count > 1 else ""
            lines.append(f"  - {keyword.word}: {keyword.count} use{suffix}")
    else:
        lines.append(f"  {NO_KEYWORDS_MESSAGE}")
    return "\n".join(lines)
