"""
Free-body diagram (DCL) evaluator.

Placed forces are matched to the reference diagram by name, or
geometrically by application point and direction. Supports must match
type and position. Scoring counts correct reference elements and a pass
needs a full score; extra forces are reported but cost nothing. Partial
credit settings do not apply.
"""

from __future__ import annotations

from typing import Optional, Sequence

from physgrade.math import angles_are_similar, distance, round_score
from physgrade.models import Force, PlacedForce, PlacedSupport, QuestionType, Support, UserAnswer

from ..evaluator import AnswerEvaluator
from ..result import DCLValidation, FeedbackTarget, ValidationResult

# Max distance between a placed element and its reference position
POSITION_TOLERANCE = 20.0

# Max angular deviation (degrees) for a force direction to count as correct
ANGLE_TOLERANCE_DEG = 15.0


def forces_match(placed: PlacedForce, expected: Force) -> bool:
    """Same name, or same application point and direction."""
    if placed.name == expected.name:
        return True
    return (
        distance(placed.application_point, expected.application_point) < POSITION_TOLERANCE
        and angles_are_similar(placed.angle, expected.angle, ANGLE_TOLERANCE_DEG)
    )


def supports_match(placed: PlacedSupport, expected: Support) -> bool:
    return placed.type == expected.type and distance(placed.position, expected.position) < POSITION_TOLERANCE


def _find_force(placed_forces: Sequence[PlacedForce], expected: Force) -> Optional[PlacedForce]:
    return next((placed for placed in placed_forces if forces_match(placed, expected)), None)


class DiagramEvaluator(AnswerEvaluator):
    """Evaluator for free-body diagrams."""

    question_type = QuestionType.DCL

    def evaluate(self, answer: UserAnswer) -> ValidationResult:
        schema = self.question.diagram_schema
        if schema is None:
            return self.rejected(FeedbackTarget.DCL_FORCES, "No diagram defined for this question")

        correct_forces = schema.correct_forces
        correct_supports = schema.correct_supports
        placed_forces = answer.placed_forces or []
        placed_supports = answer.placed_supports or []

        missing_forces: list[str] = []
        wrong_directions: list[str] = []
        for expected in correct_forces:
            found = _find_force(placed_forces, expected)
            if found is None:
                missing_forces.append(expected.name)
            elif not angles_are_similar(found.angle, expected.angle, ANGLE_TOLERANCE_DEG):
                wrong_directions.append(expected.name)

        extra_forces = [
            placed.name or "Unknown force"
            for placed in placed_forces
            if not any(forces_match(placed, expected) for expected in correct_forces)
        ]

        supports_correct = all(
            any(supports_match(placed, expected) for placed in placed_supports)
            for expected in correct_supports
        )

        validation = DCLValidation(
            forces_present=not missing_forces,
            forces_correct=not missing_forces and not wrong_directions and not extra_forces,
            supports_correct=supports_correct,
            directions_correct=not wrong_directions,
            missing_forces=missing_forces,
            extra_forces=extra_forces,
            wrong_directions=wrong_directions,
        )

        total_elements = len(correct_forces) + len(correct_supports)
        correct_elements = (len(correct_forces) - len(missing_forces) - len(wrong_directions)) + (
            len(correct_supports) if supports_correct else 0
        )
        score = round_score(100 * correct_elements / total_elements) if total_elements else 0
        is_correct = total_elements > 0 and score == 100

        feedback = self.new_feedback()
        if missing_forces:
            feedback.error(
                FeedbackTarget.DCL_FORCES,
                f"Missing forces: {', '.join(missing_forces)}",
                suggestion="Identify every force acting on the isolated body",
            )
        if extra_forces:
            feedback.warning(
                FeedbackTarget.DCL_FORCES,
                f"Extra forces: {', '.join(extra_forces)}",
                suggestion="Check whether these forces really act on the isolated body",
            )
        if wrong_directions:
            feedback.error(
                FeedbackTarget.DCL_DIRECTIONS,
                f"Incorrect directions: {', '.join(wrong_directions)}",
                suggestion="Check the sense of each force (toward or away from the body)",
            )
        if not supports_correct:
            feedback.error(
                FeedbackTarget.DCL_SUPPORTS,
                "Incorrect or missing supports",
                suggestion="Check the support types and their reactions",
            )
        if is_correct:
            feedback.success(
                FeedbackTarget.DCL_FORCES,
                "Correct free-body diagram! All forces and supports are identified.",
            )
        elif not total_elements:
            feedback.error(FeedbackTarget.DCL_FORCES, "The reference diagram has no forces or supports")

        return ValidationResult.graded(
            is_correct=is_correct,
            score=score,
            feedback=feedback.items,
            competencies=self.competencies,
            dcl_validation=validation,
        )
