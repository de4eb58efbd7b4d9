"""Tests for value sanitization."""

import math
from decimal import Decimal

import numpy as np
import pytest

from corrmatrix.analysis.correlation.algorithms import clean_series, clean_value, is_missing


class TestCleanValue:
    """Tests for clean_value."""

    @pytest.mark.parametrize("value", [None, "null", "a@b.com", "@", "abc", "", "NULL"])
    def test_missing_inputs(self, value):
        """Null, sentinel and unparsable values become NaN."""
        assert math.isnan(clean_value(value))

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("3.5", 3.5),
            (" 42 ", 42.0),
            ("-1e3", -1000.0),
            (7, 7.0),
            (2.25, 2.25),
            (True, 1.0),
            (np.int64(5), 5.0),
            (Decimal("1.5"), 1.5),
        ],
    )
    def test_numeric_inputs(self, value, expected):
        """Numbers and numeric strings are converted to float."""
        assert clean_value(value) == expected

    @pytest.mark.parametrize("value", ["inf", "-Infinity", float("inf"), float("nan"), "nan"])
    def test_non_finite_is_missing(self, value):
        """Infinite and NaN inputs are treated as missing."""
        assert math.isnan(clean_value(value))

    @pytest.mark.parametrize("value", [[1, 2], {"a": 1}, object(), 1j, 10**400])
    def test_never_raises(self, value):
        """Values float() rejects are missing, not errors."""
        assert math.isnan(clean_value(value))

    def test_sentinel_only_applies_to_strings(self):
        """The @ rule is checked on strings, numbers pass through."""
        assert math.isnan(clean_value("12@"))
        assert clean_value(12) == 12.0


class TestCleanSeries:
    """Tests for clean_series."""

    def test_preserves_length_and_order(self):
        """Output is aligned position by position with the input."""
        cleaned = clean_series([1, None, "3", "x@y", "bad", 6.5])

        assert len(cleaned) == 6
        assert cleaned[0] == 1.0
        assert cleaned[2] == 3.0
        assert cleaned[5] == 6.5
        assert [is_missing(v) for v in cleaned] == [False, True, False, True, True, False]

    def test_empty_series(self):
        assert clean_series([]) == []

    def test_accepts_numpy_array(self):
        cleaned = clean_series(np.array([1.0, np.nan, 3.0]))
        assert cleaned[0] == 1.0
        assert is_missing(cleaned[1])
        assert cleaned[2] == 3.0
