"""
Multi-step composite evaluator.

A statics problem solved end to end: draw the free-body diagram, choose
the equilibrium equations, compute the final answer. Each step the
learner attempted is graded by its own evaluator and the scores are
combined by the configured step weights.
"""

from __future__ import annotations

from physgrade.models import QuestionType, UserAnswer

from ..evaluator import AnswerEvaluator
from ..feedback import FeedbackBuilder
from ..graders import CountNormalizedGrader, GradedStep, Grader
from ..result import FeedbackTarget, ValidationResult
from .dcl import DiagramEvaluator
from .equation import EquationSelectionEvaluator
from .numeric import NumericEvaluator

# Composite score needed to pass
PASS_THRESHOLD = 90


class MultiStepEvaluator(AnswerEvaluator):
    """
    Evaluator for multi-step questions.

    Steps run in order (diagram, equations, calculation) and only when
    both the question defines them and the answer attempts them.
    """

    question_type = QuestionType.MULTI_STEP

    def grader(self) -> Grader:
        return CountNormalizedGrader()

    def graded_steps(self, answer: UserAnswer) -> list[GradedStep]:
        question, config = self.question, self.config
        steps: list[GradedStep] = []

        if question.diagram_schema is not None and answer.placed_forces is not None:
            result = DiagramEvaluator(question=question, config=config).evaluate(answer)
            steps.append(GradedStep(name="dcl", result=result, weight=config.dcl_weight))

        if question.equations is not None and answer.selected_equations is not None:
            result = EquationSelectionEvaluator(question=question, config=config).evaluate(answer)
            steps.append(GradedStep(name="equation", result=result, weight=config.equation_weight))

        if answer.final_answer is not None:
            result = NumericEvaluator(question=question, config=config).grade(answer.final_answer, answer.unit)
            steps.append(GradedStep(name="calculation", result=result, weight=config.calculation_weight))

        return steps

    def evaluate(self, answer: UserAnswer) -> ValidationResult:
        steps = self.graded_steps(answer)

        feedback = FeedbackBuilder()
        for step in steps:
            feedback.extend(step.result.feedback)

        if not steps:
            feedback.info(
                FeedbackTarget.FINAL_ANSWER,
                "No steps answered",
                suggestion="Complete the diagram, the equations or the final answer",
            )

        score = self.grader().grade(steps)
        return ValidationResult.graded(
            is_correct=score >= PASS_THRESHOLD,
            score=score,
            feedback=feedback.items,
            competencies=self.competencies,
        )
