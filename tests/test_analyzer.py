import logging
import math

import pytest

from worddash.analyzer import analyze
from worddash.config import AnalyzerConfig, config_from_dict
from worddash.models import KeywordCount, TextStatistics

SAMPLES = [
    "",
    "   \n\n  ",
    "?!... !!",
    "Hello world. This is great!",
    "First para.\n\nSecond para!\n\n\nThird?",
    "Internationalization considerations necessitate comprehensive reforms.",
]


def test_analyze_empty_text():
    stats = analyze("")
    assert stats.word_count == 0
    assert stats.char_count == 0
    assert stats.char_count_no_spaces == 0
    assert stats.sentence_count == 0
    assert stats.paragraph_count == 0
    assert stats.longest_word == ""
    assert stats.average_word_length == 0
    assert stats.top_keywords == ()
    assert stats.reading_time_minutes == 0
    assert stats.reading_level == "Very Easy"


def test_analyze_simple_sentences():
    stats = analyze("Hello world. This is great!")
    assert stats.word_count == 5
    assert stats.char_count == 27
    assert stats.char_count_no_spaces == 23
    assert stats.sentence_count == 2
    assert stats.paragraph_count == 1
    assert stats.longest_word == "world."
    assert stats.average_word_length == pytest.approx(4.6)
    assert stats.reading_time_minutes == 1
    assert stats.syllable_count == 6
    assert stats.readability_score == pytest.approx(102.7775)
    assert stats.reading_level == "Very Easy"
    assert [kw.word for kw in stats.top_keywords] == ["hello", "world", "great"]


def test_whitespace_and_punctuation_only_inputs_degrade_gracefully():
    blank = analyze("   \n\n  ")
    assert blank.word_count == 0
    assert blank.char_count == 7
    assert blank.char_count_no_spaces == 0
    assert blank.sentence_count == 0
    assert blank.paragraph_count == 0

    punct = analyze("?!... !!")
    assert punct.word_count == 2
    assert punct.sentence_count == 0
    assert punct.top_keywords == ()
    assert math.isfinite(punct.readability_score)


def test_paragraph_count_uses_blank_lines():
    assert analyze("First para.\n\nSecond para!\n\n\nThird?").paragraph_count == 3
    assert analyze("Line one.\nLine two.").paragraph_count == 1


def test_longest_word_first_wins_ties_and_keeps_case():
    assert analyze("abc xyz ab").longest_word == "abc"
    stats = analyze("Hello HELLO hello")
    assert stats.longest_word == "Hello"
    assert stats.top_keywords == (KeywordCount("hello", 3),)


def test_average_word_length_rounds_to_two_places():
    # 1 + 2 + 2 = 5 characters over 3 words
    assert analyze("a bb cc").average_word_length == 1.67


@pytest.mark.parametrize(("count", "minutes"), [(1, 1), (200, 1), (201, 2), (400, 2)])
def test_reading_time_boundaries(count: int, minutes: int):
    text = " ".join(["word"] * count)
    stats = analyze(text)
    assert stats.word_count == count
    assert stats.reading_time_minutes == minutes


def test_dense_text_is_very_difficult():
    stats = analyze(
        "Internationalization considerations necessitate comprehensive "
        "organizational restructuring initiatives"
    )
    assert stats.sentence_count == 1
    assert stats.reading_level == "Very Difficult"


def test_top_keywords_never_include_stopwords_or_exceed_limit():
    text = "the is and a to it the is and " + " ".join(f"w{i}" for i in range(12))
    stats = analyze(text)
    assert len(stats.top_keywords) == 5
    stopwords = AnalyzerConfig().stopwords
    assert not any(kw.word in stopwords for kw in stats.top_keywords)


@pytest.mark.parametrize("text", SAMPLES)
def test_invariants_hold_for_samples(text: str):
    stats = analyze(text)
    assert stats.char_count_no_spaces <= stats.char_count
    assert (stats.word_count == 0) == (stats.longest_word == "")
    assert stats.reading_time_minutes == math.ceil(stats.word_count / 200)
    assert analyze(text) == stats


@pytest.mark.parametrize("text", SAMPLES)
def test_appending_a_word_never_decreases_counts(text: str):
    before = analyze(text)
    after = analyze(text + " extra")
    assert after.word_count >= before.word_count
    assert after.char_count >= before.char_count
    assert after.char_count_no_spaces >= before.char_count_no_spaces


def test_custom_config_changes_results():
    config = AnalyzerConfig(
        words_per_minute=2,
        top_keyword_limit=1,
        stopwords=frozenset({"cat"}),
    )
    stats = analyze("cat cat dog bird dog", config)
    assert stats.reading_time_minutes == 3
    assert stats.top_keywords == (KeywordCount("dog", 2),)


def test_to_dict_uses_page_field_names():
    payload = analyze("Cats nap. Cats play.").to_dict()
    assert payload["wordCount"] == 4
    assert payload["topKeywords"] == [["cats", 2], ["nap", 1], ["play", 1]]
    assert set(payload) >= {
        "charCount",
        "charCountNoSpaces",
        "readingTimeMinutes",
        "sentenceCount",
        "paragraphCount",
        "longestWord",
        "averageWordLength",
        "readingLevel",
    }
    assert TextStatistics().to_dict()["topKeywords"] == []


def test_config_stopwords_match_normalized_tokens():
    config = config_from_dict({"stopwords": ["don't"]})
    stats = analyze("Don't stop. don't!", config)
    assert stats.top_keywords == (KeywordCount("stop", 1),)


def test_analyze_logs_debug_summary(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.DEBUG, logger="worddash.analyzer"):
        analyze("Cats nap. Cats play.")
    assert "words=4 sentences=2" in caplog.text
