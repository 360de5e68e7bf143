"""
Tiny helper script comparing default and customised analysis settings.
"""

from __future__ import annotations

from worddash import analyze, config_from_dict, render_report


def main() -> None:
    config = config_from_dict(
        {
            "words_per_minute": 150,
            "top_keyword_limit": 3,
            "stopwords": ["the", "a", "and", "it", "was", "but"],
            "reading_levels": [
                {"min_score": 80, "label": "Easy"},
                {"min_score": 50, "label": "Medium"},
            ],
            "fallback_reading_level": "Hard",
        }
    )
    samples = [
        "The cat sat on the mat. It was raining outside, but the cat was warm and happy.",
        "Quantum entanglement is a physical phenomenon that occurs when particles share proximity in ways such that their states cannot be described independently.",
    ]

    for sample in samples:
        print("-" * 40)
        print(sample)
        print(render_report(analyze(sample)))
        print(f"Custom level: {analyze(sample, config).reading_level}")


if __name__ == "__main__":
    main()
