"""Unit and property-based tests for confidence scoring."""

import math

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from langsniff.core.models import DEFAULT_SCALE_CONSTANT, ClassifierConfig
from langsniff.core.scoring import confidence, score_with_config

counts = st.integers(min_value=0, max_value=10_000)
word_totals = st.integers(min_value=0, max_value=100_000)


@pytest.mark.unit
class TestConfidence:
    """Test the count / sqrt(words) formula."""

    def test_formula(self) -> None:
        assert confidence(8, 100) == pytest.approx(DEFAULT_SCALE_CONSTANT * 0.8)
        assert confidence(5, 100) == pytest.approx(DEFAULT_SCALE_CONSTANT * 0.5)

    def test_default_scale_constant(self) -> None:
        assert DEFAULT_SCALE_CONSTANT == pytest.approx(math.sqrt(2) / 10)

    def test_zero_words_is_zero(self) -> None:
        assert confidence(5, 0) == 0.0

    def test_single_match_below_threshold_is_zero(self) -> None:
        assert confidence(1, 10) == 0.0

    def test_threshold_is_inclusive(self) -> None:
        assert confidence(2, 10) > 0.0

    def test_custom_threshold_and_scale(self) -> None:
        assert confidence(1, 4, min_matches=1, scale=1.0) == pytest.approx(0.5)
        assert confidence(3, 4, min_matches=4) == 0.0

    def test_score_with_config(self) -> None:
        config = ClassifierConfig(min_matches=3, confidence_scale_constant=1.0)

        assert score_with_config(2, 100, config) == 0.0
        assert score_with_config(3, 100, config) == pytest.approx(0.3)


@pytest.mark.unit
class TestConfidenceProperties:
    """Property-based tests for scoring invariants."""

    @given(raw=counts, words=word_totals, min_matches=st.integers(min_value=0, max_value=20))
    @settings(max_examples=200)
    def test_below_threshold_is_zero(self, raw: int, words: int, min_matches: int) -> None:
        """Property: raw_count < min_matches forces zero confidence."""
        if raw < min_matches:
            assert confidence(raw, words, min_matches=min_matches) == 0.0

    @given(raw=counts, words=word_totals)
    @settings(max_examples=200)
    def test_non_decreasing_in_count(self, raw: int, words: int) -> None:
        """Property: more matches never lower confidence."""
        assert confidence(raw + 1, words) >= confidence(raw, words)

    @given(raw=counts, words=word_totals)
    @settings(max_examples=200)
    def test_non_increasing_in_words(self, raw: int, words: int) -> None:
        """Property: the same matches over more words never raise confidence."""
        if words > 0:
            assert confidence(raw, words + 1) <= confidence(raw, words)

    @given(raw=counts, words=word_totals)
    @settings(max_examples=200)
    def test_never_negative(self, raw: int, words: int) -> None:
        assert confidence(raw, words) >= 0.0
