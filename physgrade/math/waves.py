"""
Sinusoid analytics for free-hand wave sketches.

The expected curve is ``A·sin(kx + φ)`` or ``A·cos(kx + φ)``. Drawn curves
arrive as raw point samples; the helpers here estimate their amplitude and
wavelength so they can be compared with the expected parameters.
"""

from __future__ import annotations

import math

import numpy as np


class WaveType:
    """Supported wave shapes."""

    SINE = "sine"
    COSINE = "cosine"


def phase_in_radians(phase: float, phase_unit: str | None = "rad") -> float:
    """Convert a phase to radians (degrees only when ``phase_unit == 'deg'``)."""
    if phase_unit == "deg":
        return math.radians(phase)
    return phase


def wave_number(wavelength: float | None = None, frequency: float | None = None) -> float:
    """
    Spatial or angular rate of the expected curve.

    ``2π/λ`` when a wavelength is known, ``2πf`` when only a frequency is
    known, 0 when neither is.
    """
    if wavelength:
        return 2 * math.pi / wavelength
    if frequency:
        return 2 * math.pi * frequency
    return 0.0


def expected_curve(
    xs: np.ndarray,
    amplitude: float,
    k: float,
    phase: float = 0.0,
    wave_type: str = WaveType.SINE,
) -> np.ndarray:
    """Evaluate the expected wave at each x (phase in radians)."""
    argument = k * np.asarray(xs, dtype=float) + phase
    if wave_type == WaveType.COSINE:
        return amplitude * np.cos(argument)
    return amplitude * np.sin(argument)


def estimate_amplitude(ys: np.ndarray) -> float:
    """Half the peak-to-peak excursion of a drawn curve."""
    ys = np.asarray(ys, dtype=float)
    if ys.size == 0:
        return 0.0
    return float((ys.max() - ys.min()) / 2)


def zero_crossings(xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
    """
    Locate sign changes of a sampled curve.

    Points must be sorted by x. Each crossing is placed by linear
    interpolation between the two bracketing samples; a sample exactly on
    zero counts as non-negative.
    """
    xs = np.asarray(xs, dtype=float)
    ys = np.asarray(ys, dtype=float)
    if xs.size < 2:
        return np.empty(0)

    y0, y1 = ys[:-1], ys[1:]
    x0, x1 = xs[:-1], xs[1:]
    bracket = (y0 < 0) != (y1 < 0)
    if not bracket.any():
        return np.empty(0)

    y0, y1, x0, x1 = y0[bracket], y1[bracket], x0[bracket], x1[bracket]
    return x0 - y0 * (x1 - x0) / (y1 - y0)


def estimate_wavelength(xs: np.ndarray, ys: np.ndarray) -> float | None:
    """
    Estimate wavelength as twice the mean spacing of consecutive zero crossings.

    Returns None when fewer than two crossings are found.
    """
    crossings = zero_crossings(xs, ys)
    if crossings.size < 2:
        return None
    half_wavelength = float(np.mean(np.diff(crossings)))
    return 2 * half_wavelength
