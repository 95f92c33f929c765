"""
physgrade.math - numeric and geometric helpers for answer validation

Leaf functions with no knowledge of questions or results:
- Tolerance comparison and percent error
- Distance and angle similarity with wraparound
- Unit string equivalence
- Sinusoid analytics for drawn waves
"""

from .geometry import angles_are_similar, distance, normalize_angle
from .tolerance import (
    ToleranceMode,
    is_approximately_equal,
    percent_error,
    relative_error,
    round_score,
    sign,
)
from .units import normalize_unit, units_are_equivalent
from .waves import (
    WaveType,
    estimate_amplitude,
    estimate_wavelength,
    expected_curve,
    phase_in_radians,
    wave_number,
    zero_crossings,
)

__all__ = [
    "ToleranceMode",
    "is_approximately_equal",
    "percent_error",
    "relative_error",
    "round_score",
    "sign",
    "distance",
    "normalize_angle",
    "angles_are_similar",
    "normalize_unit",
    "units_are_equivalent",
    "WaveType",
    "phase_in_radians",
    "wave_number",
    "expected_curve",
    "estimate_amplitude",
    "zero_crossings",
    "estimate_wavelength",
]
