"""
Single-selection evaluators.

Multiple-choice questions and wave-match questions (pick the equation
that describes a plotted wave) share one contract: the selected option id
is looked up among the options and its ``is_correct`` flag decides.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Optional, Sequence, Union

from physgrade.models import MCQOption, QuestionType, UserAnswer, WaveMatchOption

from ..evaluator import AnswerEvaluator
from ..result import FeedbackTarget, ValidationResult

Option = Union[MCQOption, WaveMatchOption]


class SelectionEvaluator(AnswerEvaluator):
    """Grades a single selected option, all or nothing."""

    @abstractmethod
    def options(self) -> Optional[Sequence[Option]]:
        """Options offered by the question, or None when undefined."""

    @abstractmethod
    def selected_id(self, answer: UserAnswer) -> Optional[str]:
        """Id of the option the learner picked."""

    @abstractmethod
    def option_label(self, option: Option) -> str:
        """Text naming an option in feedback."""

    def evaluate(self, answer: UserAnswer) -> ValidationResult:
        options = self.options()
        selected_id = self.selected_id(answer)
        if options is None or not selected_id:
            return self.rejected(FeedbackTarget.FINAL_ANSWER, "No answer selected")

        selected = next((option for option in options if option.id == selected_id), None)
        correct = next((option for option in options if option.is_correct), None)

        feedback = self.new_feedback()
        if selected is not None and selected.is_correct:
            feedback.success(FeedbackTarget.FINAL_ANSWER, "Correct answer!")
            return ValidationResult.graded(
                is_correct=True,
                score=100,
                feedback=feedback.items,
                competencies=self.competencies,
            )

        feedback.error(
            FeedbackTarget.FINAL_ANSWER,
            (selected.feedback if selected is not None else None) or "Incorrect answer",
            suggestion=(
                f"The correct answer was: {self.option_label(correct)}" if correct is not None else None
            ),
        )
        return ValidationResult.graded(
            is_correct=False,
            score=0,
            feedback=feedback.items,
            competencies=self.competencies,
        )


class MultipleChoiceEvaluator(SelectionEvaluator):
    question_type = QuestionType.MCQ

    def options(self) -> Optional[Sequence[Option]]:
        return self.question.options

    def selected_id(self, answer: UserAnswer) -> Optional[str]:
        return answer.selected_option

    def option_label(self, option: Option) -> str:
        return option.text


class WaveMatchEvaluator(SelectionEvaluator):
    """Options are keyed by their equation text instead of a free-text label."""

    question_type = QuestionType.WAVE_MATCH

    def options(self) -> Optional[Sequence[Option]]:
        if self.question.wave_match is None:
            return None
        return self.question.wave_match.options

    def selected_id(self, answer: UserAnswer) -> Optional[str]:
        return answer.selected_wave_option or answer.selected_option

    def option_label(self, option: Option) -> str:
        return option.equation
