"""Unit tests for stopword matching."""

import pytest

from langsniff.core.matcher import StopwordMatcher


@pytest.mark.unit
class TestStopwordMatcherCount:
    """Test counting of stopword occurrences."""

    def test_counts_every_occurrence(self) -> None:
        matcher = StopwordMatcher(["the", "and"])

        assert matcher.count("the cat and the dog") == 3

    def test_does_not_match_inside_longer_words(self) -> None:
        matcher = StopwordMatcher(["the", "and"])

        assert matcher.count("theatre other bathe android sandy") == 0

    def test_matching_is_case_sensitive(self) -> None:
        matcher = StopwordMatcher(["the"])

        assert matcher.count("The THE the") == 1

    def test_punctuation_is_a_boundary(self) -> None:
        matcher = StopwordMatcher(["the", "and"])

        assert matcher.count("(the), and. the!") == 3

    def test_duplicate_words_count_once_per_occurrence(self) -> None:
        matcher = StopwordMatcher(["the", "the", " the "])

        assert matcher.words == ("the",)
        assert matcher.count("the the") == 2

    def test_prefix_words_are_both_recognized(self) -> None:
        matcher = StopwordMatcher(["in", "into"])

        assert matcher.count("into the in") == 2

    def test_unicode_word_boundaries(self) -> None:
        matcher = StopwordMatcher(["für", "über"])

        assert matcher.count("für fürchten gegenüber über") == 2

    def test_regex_metacharacters_are_literal(self) -> None:
        matcher = StopwordMatcher(["a.b"])

        assert matcher.count("a.b axb") == 1

    def test_empty_text(self) -> None:
        assert StopwordMatcher(["the"]).count("") == 0


@pytest.mark.unit
class TestStopwordMatcherMalformed:
    """Test that malformed word lists never match."""

    @pytest.mark.parametrize(
        "words",
        [None, [], ["", "   "], [1, 2], "the and", 42],
    )
    def test_malformed_list_never_matches(self, words: object) -> None:
        matcher = StopwordMatcher(words)  # type: ignore[arg-type]

        assert matcher.is_empty
        assert matcher.count("the and 1 2 42") == 0
        assert matcher.spans("the and") == []


@pytest.mark.unit
class TestStopwordMatcherSpans:
    """Test match span reporting."""

    def test_spans_in_text_order(self) -> None:
        matcher = StopwordMatcher(["the"])

        assert matcher.spans("a the b the") == [(2, 5), (8, 11)]

    def test_spans_agree_with_count(self) -> None:
        matcher = StopwordMatcher(["und", "der", "die"])
        text = "der Hund und die Katze, der Rest"

        assert len(matcher.spans(text)) == matcher.count(text) == 4
