import pytest

from chwire.word_matcher import WordMatcher, contains_word


@pytest.mark.parametrize(
    "haystack, needle, expected",
    [
        ("select * from test", "select", True),
        ("select * from test", "*", True),
        ("select * from test", "elect", True),
        ("select * from test", "zelect", False),
        ("select * from test", "sElEct", True),
    ],
)
def test_contains_word(haystack, needle, expected):
    assert contains_word(haystack, needle) is expected


def test_matcher_fires_on_last_character_and_resets():
    matcher = WordMatcher("in")
    results = [matcher.match(c) for c in "xInin"]
    assert results == [False, False, True, False, True]


def test_mismatch_does_not_retry_current_character():
    # "s" breaks the partial "s" match and is not reconsidered as a new start.
    assert contains_word("sselect", "select") is False


def test_empty_needle_rejected():
    with pytest.raises(ValueError):
        WordMatcher("")