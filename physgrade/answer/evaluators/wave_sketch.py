"""
Wave sketch evaluator.

Grades a free-hand curve against the expected sinusoid on three
criteria: amplitude (peak-to-peak estimate), wavelength (zero-crossing
spacing) and overall shape (mean point-wise deviation). Phase is not
measured on its own; it is taken as correct whenever the shape is close
enough to the expected curve, which already encodes the phase.
"""

from __future__ import annotations

import numpy as np

from physgrade.math import (
    estimate_amplitude,
    estimate_wavelength,
    expected_curve,
    phase_in_radians,
    wave_number,
)
from physgrade.models import QuestionType, UserAnswer

from ..evaluator import AnswerEvaluator
from ..feedback import format_number
from ..result import FeedbackTarget, ValidationResult, WaveSketchValidation

MIN_DRAWN_POINTS = 10

# Relative error limits
AMPLITUDE_TOLERANCE = 0.20
WAVELENGTH_TOLERANCE = 0.25

# Shape accuracy (0-100) needed for the shape and phase criteria
SHAPE_THRESHOLD = 60.0
PHASE_SHAPE_THRESHOLD = 50.0

# Each unit of mean normalized deviation costs this many accuracy points
SHAPE_ERROR_WEIGHT = 50.0

AMPLITUDE_POINTS = 30
WAVELENGTH_POINTS = 30
SHAPE_POINTS = 40
PASS_THRESHOLD = 80

# Floor for the amplitude used as a normalizer
_MIN_AMPLITUDE = 1e-9


class WaveSketchEvaluator(AnswerEvaluator):
    """Evaluator for drawn waves."""

    question_type = QuestionType.WAVE_SKETCH

    def evaluate(self, answer: UserAnswer) -> ValidationResult:
        wave = self.question.wave_sketch
        if wave is None:
            return self.rejected(FeedbackTarget.WAVE_SHAPE, "No wave defined for this question")

        points = answer.drawn_points or []
        if len(points) < MIN_DRAWN_POINTS:
            return self.rejected(
                FeedbackTarget.WAVE_SHAPE,
                "Insufficient drawing",
                suggestion=f"Draw the wave across the grid (at least {MIN_DRAWN_POINTS} points)",
            )

        xs = np.array([point.x for point in points], dtype=float)
        ys = np.array([point.y for point in points], dtype=float)
        order = np.argsort(xs, kind="stable")
        xs, ys = xs[order], ys[order]

        expected_amplitude = abs(wave.amplitude)
        normalizer = max(expected_amplitude, _MIN_AMPLITUDE)

        drawn_amplitude = estimate_amplitude(ys)
        amplitude_error = abs(drawn_amplitude - expected_amplitude) / normalizer
        amplitude_correct = amplitude_error < AMPLITUDE_TOLERANCE

        k = wave_number(wave.wavelength, wave.frequency)
        phase = phase_in_radians(wave.phase, wave.phase_unit)
        reference = expected_curve(xs, wave.amplitude, k, phase, wave.wave_type)
        mean_deviation = float(np.mean(np.abs(ys - reference))) / normalizer
        shape_accuracy = max(0.0, 100.0 - mean_deviation * SHAPE_ERROR_WEIGHT)
        shape_correct = shape_accuracy > SHAPE_THRESHOLD

        drawn_wavelength = None
        wavelength_error = 0.0
        wavelength_correct = True
        if wave.wavelength:
            drawn_wavelength = estimate_wavelength(xs, ys)
            # Fewer than two zero crossings: the check is skipped
            if drawn_wavelength is not None:
                wavelength_error = abs(drawn_wavelength - wave.wavelength) / abs(wave.wavelength)
                wavelength_correct = wavelength_error < WAVELENGTH_TOLERANCE

        phase_correct = shape_accuracy > PHASE_SHAPE_THRESHOLD

        score = (
            (AMPLITUDE_POINTS if amplitude_correct else 0)
            + (WAVELENGTH_POINTS if wavelength_correct else 0)
            + (SHAPE_POINTS if shape_correct else 0)
        )
        is_correct = score >= PASS_THRESHOLD

        feedback = self.new_feedback()
        if amplitude_correct:
            feedback.success(FeedbackTarget.WAVE_AMPLITUDE, "Amplitude is correct")
        else:
            feedback.error(
                FeedbackTarget.WAVE_AMPLITUDE,
                f"Amplitude is off: drawn ≈ {format_number(round(drawn_amplitude, 3))}, "
                f"expected {format_number(expected_amplitude)}",
                suggestion="The amplitude is the distance from the axis to a crest",
            )

        if drawn_wavelength is not None:
            if wavelength_correct:
                feedback.success(FeedbackTarget.WAVE_WAVELENGTH, "Wavelength is correct")
            else:
                feedback.error(
                    FeedbackTarget.WAVE_WAVELENGTH,
                    f"Wavelength is off: drawn ≈ {format_number(round(drawn_wavelength, 3))}, "
                    f"expected {format_number(wave.wavelength)}",
                    suggestion="One wavelength spans two consecutive crests",
                )

        if shape_correct:
            feedback.success(
                FeedbackTarget.WAVE_SHAPE, f"Shape matches the expected wave ({shape_accuracy:.0f}%)"
            )
        else:
            feedback.error(
                FeedbackTarget.WAVE_SHAPE,
                f"Shape does not match the expected wave ({shape_accuracy:.0f}%)",
                suggestion=f"Expected a {wave.wave_type} wave",
            )

        if not phase_correct:
            feedback.hint(
                FeedbackTarget.WAVE_PHASE,
                "Check where the wave starts at the origin",
                suggestion="A sine starts at zero, a cosine starts at a crest",
            )

        validation = WaveSketchValidation(
            amplitude_correct=amplitude_correct,
            wavelength_correct=wavelength_correct,
            phase_correct=phase_correct,
            shape_correct=shape_correct,
            amplitude_error=amplitude_error,
            wavelength_error=wavelength_error,
            phase_error=0.0,
            overall_accuracy=shape_accuracy,
        )
        return ValidationResult.graded(
            is_correct=is_correct,
            score=score,
            feedback=feedback.items,
            competencies=self.competencies,
            wave_sketch_validation=validation,
        )
