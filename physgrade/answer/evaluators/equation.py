"""
Equilibrium equation selection evaluator.

The learner picks the equations (e.g. ΣFx=0, ΣFy=0, ΣMA=0) needed to
solve the problem. Missing and unnecessary equations are set differences
by identifier.
"""

from __future__ import annotations

from physgrade.math import round_score
from physgrade.models import QuestionType, UserAnswer

from ..evaluator import AnswerEvaluator
from ..result import EquationValidation, FeedbackTarget, ValidationResult

# Points deducted per unnecessary equation
WRONG_EQUATION_PENALTY = 20

EQUILIBRIUM_HINT = "A 2D equilibrium problem needs ΣFx=0, ΣFy=0 and ΣM=0"


class EquationSelectionEvaluator(AnswerEvaluator):
    """Evaluator for equation-selection questions (exact set match to pass)."""

    question_type = QuestionType.EQUATION

    def evaluate(self, answer: UserAnswer) -> ValidationResult:
        equations = self.question.equations
        if equations is None or not equations.required:
            return self.rejected(
                FeedbackTarget.EQUATION_SELECTION, "No equations defined for this question"
            )

        required = list(dict.fromkeys(equations.required))
        selected = list(dict.fromkeys(answer.selected_equations or []))

        missing = [equation for equation in required if equation not in selected]
        wrong = [equation for equation in selected if equation not in required]
        is_correct = not missing and not wrong

        validation = EquationValidation(
            equations_selected=bool(selected),
            equations_correct=is_correct,
            missing_equations=missing,
            wrong_equations=wrong,
        )

        score = round_score(100 * (len(required) - len(missing)) / len(required))
        score = max(0, score - WRONG_EQUATION_PENALTY * len(wrong))

        feedback = self.new_feedback()
        if missing:
            feedback.error(
                FeedbackTarget.EQUATION_SELECTION,
                f"Missing equations: {', '.join(missing)}",
                suggestion=EQUILIBRIUM_HINT,
            )
        if wrong:
            feedback.warning(
                FeedbackTarget.EQUATION_SELECTION,
                f"Unnecessary equations: {', '.join(wrong)}",
            )
        if is_correct:
            feedback.success(FeedbackTarget.EQUATION_SELECTION, "Correct equations selected!")

        return ValidationResult.graded(
            is_correct=is_correct,
            score=score,
            feedback=feedback.items,
            competencies=self.competencies,
            equation_validation=validation,
        )
