"""
Base answer evaluator.

Provides the abstract base class shared by the per-type evaluators. An
evaluator is built for one question and one configuration, and grades a
user answer into a ValidationResult.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from physgrade.models import Question, QuestionType, UserAnswer

from .config import DEFAULT_VALIDATION_CONFIG, ValidationConfig
from .feedback import FeedbackBuilder
from .result import FeedbackTarget, ValidationResult


class AnswerEvaluator(BaseModel, ABC):
    """
    Abstract base class for answer evaluators.

    Each evaluator is responsible for grading answers to one question
    type against the question's expected-answer specification.

    Subclasses must implement:
    - evaluate(): Core grading logic
    - question_type: Class variable for type identification

    Evaluators never raise for well-typed input: missing answers and
    missing specification sub-objects become zero-score results.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    question_type: ClassVar[QuestionType]

    question: Question = Field(description="The question being answered")
    config: ValidationConfig = Field(
        default=DEFAULT_VALIDATION_CONFIG, description="Grading policy"
    )

    @abstractmethod
    def evaluate(self, answer: UserAnswer) -> ValidationResult:
        """
        Grade the learner's answer.

        Args:
            answer: The learner's answer record

        Returns:
            ValidationResult with score, feedback and type-specific detail
        """

    @property
    def competencies(self) -> list[str]:
        """Competency tags reported with results for this question."""
        return list(self.question.tags)

    def new_feedback(self) -> FeedbackBuilder:
        return FeedbackBuilder()

    def rejected(self, target: FeedbackTarget, message: str, **detail: Any) -> ValidationResult:
        """Zero-score result for a missing answer or missing specification."""
        return ValidationResult.rejected(target, message, competencies=self.competencies, **detail)
