"""
Tests for tolerance comparison, error measures and score rounding.
"""

import math

import pytest

from physgrade.math import (
    ToleranceMode,
    is_approximately_equal,
    percent_error,
    relative_error,
    round_score,
    sign,
)


class TestIsApproximatelyEqual:
    """Percent and absolute tolerance modes."""

    def test_percent_mode(self):
        assert is_approximately_equal(49, 50, 2) is True
        assert is_approximately_equal(48.9, 50, 2) is False
        assert is_approximately_equal(-49, -50, 2, ToleranceMode.PERCENT) is True

    def test_absolute_mode(self):
        assert is_approximately_equal(10.3, 10, 0.5, ToleranceMode.ABSOLUTE) is True
        assert is_approximately_equal(10.6, 10, 0.5, "absolute") is False

    def test_boundary_is_inclusive(self):
        assert is_approximately_equal(10.5, 10, 0.5, "absolute") is True
        assert is_approximately_equal(51, 50, 2, "percent") is True

    def test_percent_mode_with_zero_expected(self):
        assert is_approximately_equal(0.02, 0, 2) is True
        assert is_approximately_equal(-0.02, 0, 2) is True
        assert is_approximately_equal(0.03, 0, 2) is False
        assert is_approximately_equal(0, 0, 0) is True

    def test_zero_tolerance_needs_exact_value(self):
        assert is_approximately_equal(5, 5, 0) is True
        assert is_approximately_equal(5.1, 5, 0) is False

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            is_approximately_equal(1, 1, 1, "relative")


class TestErrors:
    def test_percent_error(self):
        assert percent_error(45, 50) == pytest.approx(10.0)
        assert percent_error(-50, 50) == pytest.approx(200.0)
        assert percent_error(0, 0) == 0.0
        assert percent_error(1, 0) == math.inf

    def test_relative_error(self):
        assert relative_error(2.2, 2) == pytest.approx(0.1)
        assert relative_error(0.3, 0) == pytest.approx(0.3)

    def test_sign(self):
        assert sign(3.2) == 1
        assert sign(-0.1) == -1
        assert sign(0) == 0


class TestRoundScore:
    @pytest.mark.parametrize(
        "value,expected",
        [(0.5, 1), (2.5, 3), (66.666, 67), (33.333, 33), (42.49, 42), (100.0, 100), (0.0, 0)],
    )
    def test_rounds_half_up(self, value, expected):
        assert round_score(value) == expected
