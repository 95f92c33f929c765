"""
Plane geometry helpers for free-body diagram matching.

Points are anything with ``x`` and ``y`` attributes (``Point2D`` models,
placed force application points, support positions).
"""

from __future__ import annotations

import math
from typing import Protocol


class PointLike(Protocol):
    x: float
    y: float


def distance(p1: PointLike, p2: PointLike) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


def normalize_angle(degrees: float) -> float:
    """Normalize an angle in degrees into [0, 360)."""
    degrees = math.fmod(degrees, 360.0)
    return degrees + 360.0 if degrees < 0 else degrees


def angles_are_similar(angle1: float, angle2: float, tolerance: float = 5.0) -> bool:
    """
    Check whether two angles (degrees) agree within a tolerance.

    Wraparound is honored, so 359 and 1 differ by 2 degrees.
    """
    diff = abs(normalize_angle(angle1) - normalize_angle(angle2))
    return diff <= tolerance or diff >= 360.0 - tolerance
