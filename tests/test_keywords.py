from worddash.keywords import keyword_frequencies, top_keywords
from worddash.models import KeywordCount


def test_top_keywords_skips_stopwords():
    words = "The cat and the hat. The cat sat.".split()
    assert top_keywords(words) == [
        KeywordCount("cat", 2),
        KeywordCount("hat", 1),
        KeywordCount("sat", 1),
    ]


def test_top_keywords_limit_and_first_appearance_ties():
    words = "alpha beta gamma delta epsilon zeta eta".split()
    result = top_keywords(words)
    assert [kw.word for kw in result] == ["alpha", "beta", "gamma", "delta", "epsilon"]

    tied = top_keywords("zeta alpha zeta alpha beta".split())
    assert [tuple(kw) for kw in tied] == [("zeta", 2), ("alpha", 2), ("beta", 1)]


def test_top_keywords_drops_punctuation_only_tokens():
    assert top_keywords(["!!!", "--", "..."]) == []


def test_custom_stopwords_and_zero_limit():
    words = ["Cat", "dog", "cat"]
    assert top_keywords(words, stopwords=frozenset({"cat"})) == [KeywordCount("dog", 1)]
    assert top_keywords(words, limit=0) == []


def test_keyword_frequencies_normalizes_case_and_punctuation():
    counts = keyword_frequencies(["Hello", "hello!", "HELLO,", "the"])
    assert dict(counts) == {"hello": 3}


def test_keyword_count_unpacks_as_pair():
    word, count = KeywordCount("cat", 2)
    assert (word, count) == ("cat", 2)
