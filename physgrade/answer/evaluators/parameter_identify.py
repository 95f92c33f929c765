"""
Parameter identification evaluator.

The learner reads a plotted wave and reports some of its parameters
(amplitude, wavelength, frequency, period, phase). Each requested
parameter is compared with the plotted wave's value by relative error.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Optional

from physgrade.math import relative_error, round_score
from physgrade.models import QuestionType, UserAnswer, WaveSketchConfig

from ..evaluator import AnswerEvaluator
from ..feedback import format_number
from ..result import FeedbackTarget, ValidationResult

PARAMETER_TOLERANCE = 0.10
PHASE_TOLERANCE = 0.20

PARAMETER_LABELS = MappingProxyType(
    {
        "amplitude": "Amplitude (A)",
        "wavelength": "Wavelength (λ)",
        "frequency": "Frequency (f)",
        "period": "Period (T)",
        "phase": "Initial phase (φ)",
    }
)


def expected_parameter(wave: WaveSketchConfig, parameter: str) -> Optional[float]:
    """
    Value of a parameter for the plotted wave.

    The period is derived from the frequency; None when the wave does not
    define the parameter.
    """
    if parameter == "amplitude":
        return wave.amplitude
    if parameter == "wavelength":
        return wave.wavelength
    if parameter == "frequency":
        return wave.frequency
    if parameter == "period":
        return 1 / wave.frequency if wave.frequency else None
    if parameter == "phase":
        return wave.phase
    return None


def parameter_tolerance(parameter: str) -> float:
    return PHASE_TOLERANCE if parameter == "phase" else PARAMETER_TOLERANCE


class ParameterIdentifyEvaluator(AnswerEvaluator):
    """Evaluator for reading wave parameters off a graph."""

    question_type = QuestionType.PARAMETER_IDENTIFY

    def evaluate(self, answer: UserAnswer) -> ValidationResult:
        task = self.question.parameter_identify
        if task is None or not task.parameters_to_find:
            return self.rejected(
                FeedbackTarget.WAVE_PARAMETERS, "No parameters to identify for this question"
            )

        submitted = answer.identified_parameters or {}
        if not any(value is not None for value in submitted.values()):
            return self.rejected(FeedbackTarget.WAVE_PARAMETERS, "No parameters identified")

        parameters = list(dict.fromkeys(task.parameters_to_find))
        feedback = self.new_feedback()
        correct_count = 0

        for parameter in parameters:
            label = PARAMETER_LABELS.get(parameter, parameter)
            expected = expected_parameter(task.wave_config, parameter)
            value = submitted.get(parameter)

            if expected is None:
                feedback.error(
                    FeedbackTarget.WAVE_PARAMETERS,
                    f"{label}: cannot be graded, the wave does not define it",
                )
                continue

            if value is None:
                feedback.error(
                    FeedbackTarget.WAVE_PARAMETERS,
                    f"{label}: no value given",
                    suggestion=f"Expected answer: {format_number(expected)}",
                )
                continue

            if relative_error(value, expected) < parameter_tolerance(parameter):
                correct_count += 1
                feedback.success(
                    FeedbackTarget.WAVE_PARAMETERS, f"{label}: correct ({format_number(value)})"
                )
            else:
                feedback.error(
                    FeedbackTarget.WAVE_PARAMETERS,
                    f"{label}: {format_number(value)} submitted, expected {format_number(expected)}",
                )

        score = round_score(100 * correct_count / len(parameters))
        return ValidationResult.graded(
            is_correct=correct_count == len(parameters),
            score=score,
            feedback=feedback.items,
            competencies=self.competencies,
        )
