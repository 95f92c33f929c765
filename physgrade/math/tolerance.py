"""
Tolerance-based numeric comparison.

Percent and absolute tolerance checks, percent error and the rounding
used for every score the engine reports.
"""

from __future__ import annotations

import math

# Slack for floating point noise at the exact tolerance boundary
EPSILON = 1e-12


class ToleranceMode:
    """Modes for tolerance comparison."""

    PERCENT = "percent"  # |a - b| / |b| * 100 <= tol
    ABSOLUTE = "absolute"  # |a - b| <= tol


def is_approximately_equal(
    value: float,
    expected: float,
    tolerance: float,
    mode: str = ToleranceMode.PERCENT,
) -> bool:
    """
    Compare a value to an expected value within a tolerance.

    Args:
        value: Submitted value
        expected: Reference value
        tolerance: Tolerance (percent points in percent mode)
        mode: "percent" or "absolute"

    Returns:
        True if value is within tolerance of expected

    Percent mode with ``expected == 0`` requires ``|value| <= tolerance / 100``.
    """
    if mode == ToleranceMode.ABSOLUTE:
        return abs(value - expected) <= tolerance + EPSILON

    if mode == ToleranceMode.PERCENT:
        if expected == 0:
            return abs(value) <= tolerance / 100 + EPSILON
        return abs((value - expected) / expected) * 100 <= tolerance + EPSILON

    raise ValueError(f"Unknown tolerance mode: {mode}")


def percent_error(value: float, expected: float) -> float:
    """Relative error in percent; infinite when expected is 0 and value is not."""
    if expected == 0:
        return 0.0 if value == 0 else math.inf
    return abs((value - expected) / expected) * 100


def relative_error(value: float, expected: float) -> float:
    """Relative error as a fraction; falls back to absolute error at expected == 0."""
    if expected == 0:
        return abs(value)
    return abs(value - expected) / abs(expected)


def sign(value: float) -> int:
    """Return -1, 0 or 1."""
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def round_score(value: float) -> int:
    """Round half up (2.5 -> 3), the convention used for all reported scores."""
    return math.floor(value + 0.5)
