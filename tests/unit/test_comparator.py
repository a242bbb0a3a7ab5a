"""
Unit tests for the coverage comparator
"""

import pytest

from locale_coverage.services.comparator import (
    compare,
    coverage_percent,
    validate_baseline,
    InvalidInputError,
)


class TestCompare:
    """Test cases for compare()"""

    def test_missing_key(self):
        result = compare({"a": "1", "b": "2"}, {"a": "1"}, "ru")
        assert result.locale == "ru"
        assert result.missing == ("b",)
        assert result.extra == ()
        assert result.coverage == "50.0"
        assert result.total_keys == 1
        assert result.baseline_keys == 2
        assert result.is_complete is False

    def test_extra_key_reports_coverage_above_hundred(self):
        result = compare({"a": "1"}, {"a": "1", "c": "3"}, "de")
        assert result.missing == ()
        assert result.extra == ("c",)
        assert result.coverage == "200.0"
        assert result.is_complete is False

    def test_identical_keys_are_complete(self):
        result = compare({"a": "1"}, {"a": "uno"}, "es")
        assert result.missing == ()
        assert result.extra == ()
        assert result.coverage == "100.0"
        assert result.is_complete is True

    def test_empty_baseline_rejected(self):
        with pytest.raises(InvalidInputError):
            compare({}, {"a": "1"}, "fr")

    def test_empty_candidate(self):
        result = compare({"a": "1", "b": "2"}, {}, "it")
        assert result.missing == ("a", "b")
        assert result.coverage == "0.0"
        assert not result.is_complete

    def test_missing_follows_baseline_order_and_extra_follows_candidate_order(self):
        baseline = {"z": 1, "a": 2, "m": 3, "k": 4}
        candidate = {"k": 4, "y": 0, "b": 0}
        result = compare(baseline, candidate, "xx")
        assert result.missing == ("z", "a", "m")
        assert result.extra == ("y", "b")

    def test_missing_and_extra_are_disjoint_from_other_side(self):
        baseline = {"a": 1, "b": 2, "c": 3}
        candidate = {"b": 2, "d": 4}
        result = compare(baseline, candidate, "xx")
        assert not set(result.missing) & set(candidate)
        assert not set(result.extra) & set(baseline)

    def test_same_keys_different_order_is_complete(self):
        result = compare({"a": 1, "b": 2}, {"b": 2, "a": 1}, "xx")
        assert result.is_complete
        assert result.coverage == "100.0"

    def test_idempotent(self):
        baseline = {"a": "1", "b": "2"}
        candidate = {"a": "1", "c": "3"}
        assert compare(baseline, candidate, "ru") == compare(baseline, candidate, "ru")

    def test_inputs_not_mutated(self):
        baseline = {"a": "1", "b": "2"}
        candidate = {"a": "1"}
        compare(baseline, candidate, "ru")
        assert baseline == {"a": "1", "b": "2"}
        assert candidate == {"a": "1"}


class TestCoveragePercent:
    """Test cases for coverage rounding"""

    def test_rounds_to_one_decimal(self):
        assert coverage_percent(1, 3) == "33.3"
        assert coverage_percent(2, 3) == "66.7"

    def test_half_rounds_away_from_zero(self):
        # 1/16 * 100 = 6.25 exactly
        assert coverage_percent(1, 16) == "6.3"
        # 3/16 * 100 = 18.75 exactly
        assert coverage_percent(3, 16) == "18.8"

    def test_whole_numbers_keep_one_decimal(self):
        assert coverage_percent(4, 4) == "100.0"
        assert coverage_percent(0, 7) == "0.0"


class TestValidateBaseline:
    def test_accepts_non_empty(self):
        validate_baseline({"a": "1"})

    def test_rejects_empty(self):
        with pytest.raises(InvalidInputError, match="no keys"):
            validate_baseline({})
