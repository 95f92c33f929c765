"""
Numeric answer evaluator.

Compares a submitted value and unit against the expected answer with
percent or absolute tolerance, checks the sign, surfaces pre-authored
common mistakes, and awards partial credit for near misses.
"""

from __future__ import annotations

import math
import re
from typing import Optional, Sequence

from physgrade.math import (
    is_approximately_equal,
    percent_error,
    sign,
    units_are_equivalent,
)
from physgrade.models import Answer, CommonMistake, QuestionType, UserAnswer

from ..evaluator import AnswerEvaluator
from ..feedback import FeedbackBuilder, format_quantity
from ..result import FeedbackTarget, NumericValidation, ValidationResult

# Tolerance (percent) used to match "value" common-mistake patterns
MISTAKE_VALUE_TOLERANCE = 2.0

# Partial credit awarded for a value within tolerance but with a wrong unit
WRONG_UNIT_CREDIT = 80.0

# Near misses earn (PARTIAL_CREDIT_CEILING - percent error) points
PARTIAL_CREDIT_CEILING = 50.0


def value_as_text(value: float) -> str:
    """
    Text form of a number as the UI renders it.

    Shortest round-trip digits, no trailing '.0' on integers, plain
    notation for 1e-6 <= |value| < 1e21 and ``1.5e+21`` / ``1e-7`` style
    exponents outside it. Infinities read ``Infinity``.

    Examples:
        >>> value_as_text(50.0), value_as_text(1e-7), value_as_text(1e21)
        ('50', '1e-7', '1e+21')
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    prefix = "-" if value < 0 else ""
    mantissa, _, exponent = repr(abs(value)).partition("e")
    whole, _, fraction = mantissa.partition(".")
    if fraction == "0":
        fraction = ""
    combined = whole + fraction
    stripped = combined.lstrip("0")
    # value == 0.<digits> * 10**point
    point = len(whole) + int(exponent or 0) - (len(combined) - len(stripped))
    digits = stripped.rstrip("0")
    count = len(digits)

    if count <= point <= 21:
        return prefix + digits + "0" * (point - count)
    if 0 < point <= 21:
        return prefix + digits[:point] + "." + digits[point:]
    if -6 < point <= 0:
        return prefix + "0." + "0" * -point + digits

    power = point - 1
    power_text = f"e+{power}" if power >= 0 else f"e-{-power}"
    if count == 1:
        return prefix + digits + power_text
    return prefix + digits[0] + "." + digits[1:] + power_text


def match_common_mistake(
    value: float, mistakes: Sequence[CommonMistake]
) -> Optional[CommonMistake]:
    """
    Find the first common-mistake pattern the value matches.

    - ``value`` patterns match within 2% of the pattern's number
    - ``range`` patterns match min <= value <= max
    - ``regex`` patterns are searched in the value's text form

    Malformed patterns never match.
    """
    for mistake in mistakes:
        if mistake.pattern_type == "value":
            try:
                target = float(mistake.pattern)
            except ValueError:
                continue
            if is_approximately_equal(value, target, MISTAKE_VALUE_TOLERANCE, "percent"):
                return mistake

        elif mistake.pattern_type == "range":
            if (
                mistake.min_value is not None
                and mistake.max_value is not None
                and mistake.min_value <= value <= mistake.max_value
            ):
                return mistake

        elif mistake.pattern_type == "regex":
            try:
                pattern = re.compile(mistake.pattern)
            except re.error:
                continue
            if pattern.search(value_as_text(value)):
                return mistake

    return None


class NumericEvaluator(AnswerEvaluator):
    """
    Evaluator for numeric answers with units.

    Supports:
    - Percent and absolute tolerance (from the answer or the config)
    - Sign and unit checks
    - Common-mistake warnings (grading continues after a match)
    - Partial credit for near misses and wrong units
    """

    question_type = QuestionType.NUMERIC

    def evaluate(self, answer: UserAnswer) -> ValidationResult:
        return self.grade(answer.numeric_value, answer.unit)

    def grade(self, value: Optional[float], unit: Optional[str]) -> ValidationResult:
        """
        Grade a bare value and unit.

        Shared by the numeric question type and the final-answer step of
        multi-step questions.
        """
        expected = self.question.expected_answer()
        if expected is None:
            return ValidationResult.rejected(
                FeedbackTarget.FINAL_ANSWER, "No expected answer defined for this question"
            )

        if value is None:
            return ValidationResult.rejected(
                FeedbackTarget.FINAL_ANSWER,
                "No numeric value provided",
                numeric_validation=NumericValidation(
                    is_within_tolerance=False,
                    percent_error=100.0,
                    absolute_error=abs(expected.value),
                    unit_correct=False,
                    sign_correct=True,
                ),
            )

        feedback = FeedbackBuilder()
        user_unit = unit or ""

        mistake = match_common_mistake(value, self.question.common_mistakes)
        if mistake is not None:
            feedback.warning(FeedbackTarget.CALCULATION, mistake.message, suggestion=mistake.hint or None)

        validation = self.compare(value, user_unit, expected)
        require_units = self.config.require_correct_units
        is_correct = validation.is_within_tolerance and (validation.unit_correct or not require_units)
        score = self.score(is_correct, validation)

        if is_correct:
            feedback.success(FeedbackTarget.FINAL_ANSWER, "Correct answer!")
        else:
            if not validation.sign_correct:
                feedback.error(
                    FeedbackTarget.CALCULATION,
                    "Check the sign of your answer",
                    suggestion="Review the sign convention chosen for the axes",
                )
            if not validation.is_within_tolerance:
                feedback.error(
                    FeedbackTarget.FINAL_ANSWER,
                    f"Incorrect value (error of {validation.percent_error:.1f}%)",
                    suggestion=f"The expected answer was {format_quantity(expected.value, expected.unit)}",
                )
            if not validation.unit_correct and require_units:
                feedback.warning(
                    FeedbackTarget.UNITS,
                    f'Incorrect unit: "{user_unit}"',
                    suggestion=f"The expected unit was: {expected.unit}",
                )

        return ValidationResult.graded(
            is_correct=is_correct,
            score=score,
            feedback=feedback.items,
            numeric_validation=validation,
        )

    def compare(self, value: float, unit: str, expected: Answer) -> NumericValidation:
        """Tolerance, sign and unit comparison against one expected answer."""
        tolerance = expected.tolerance or self.config.default_numeric_tolerance
        tolerance_type = expected.tolerance_type or self.config.default_tolerance_type

        unit_correct = (
            not self.config.require_correct_units
            or not expected.unit
            or units_are_equivalent(unit, expected.unit)
        )

        return NumericValidation(
            is_within_tolerance=is_approximately_equal(value, expected.value, tolerance, tolerance_type),
            percent_error=percent_error(value, expected.value),
            absolute_error=abs(value - expected.value),
            unit_correct=unit_correct,
            sign_correct=expected.value == 0 or sign(value) == sign(expected.value),
        )

    def score(self, is_correct: bool, validation: NumericValidation) -> float:
        if is_correct:
            return 100.0
        if not self.config.enable_partial_credit:
            return 0.0

        score = 0.0
        if validation.sign_correct and validation.percent_error < PARTIAL_CREDIT_CEILING:
            score = max(0.0, PARTIAL_CREDIT_CEILING - validation.percent_error)
        if validation.is_within_tolerance and not validation.unit_correct:
            score = WRONG_UNIT_CREDIT
        return score
