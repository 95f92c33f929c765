"""
Validation entry point.

``validate`` maps (question, user answer, config) to a ValidationResult.
It is pure and stateless, and it never raises: malformed records,
unsupported question types and unexpected evaluator failures all come
back as zero-score results with an explanatory feedback item.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from physgrade.models import Question, QuestionType, UserAnswer

from .config import DEFAULT_VALIDATION_CONFIG, ValidationConfig
from .evaluator import AnswerEvaluator
from .evaluators import (
    DiagramEvaluator,
    EquationSelectionEvaluator,
    MultipleChoiceEvaluator,
    MultiStepEvaluator,
    NumericEvaluator,
    ParameterIdentifyEvaluator,
    WaveMatchEvaluator,
    WaveSketchEvaluator,
)
from .result import FeedbackTarget, ValidationResult

logger = logging.getLogger(__name__)

QuestionInput = Union[Question, Mapping[str, Any]]
AnswerInput = Union[UserAnswer, Mapping[str, Any], None]
ConfigInput = Union[ValidationConfig, Mapping[str, Any], None]


def evaluator_for(question_type: str) -> Optional[type[AnswerEvaluator]]:
    """
    Evaluator class for a question type.

    Returns None for types the engine does not grade.
    """
    if question_type == QuestionType.MCQ:
        return MultipleChoiceEvaluator
    elif question_type == QuestionType.NUMERIC:
        return NumericEvaluator
    elif question_type == QuestionType.DCL:
        return DiagramEvaluator
    elif question_type == QuestionType.EQUATION:
        return EquationSelectionEvaluator
    elif question_type == QuestionType.MULTI_STEP:
        return MultiStepEvaluator
    elif question_type == QuestionType.WAVE_SKETCH:
        return WaveSketchEvaluator
    elif question_type == QuestionType.WAVE_MATCH:
        return WaveMatchEvaluator
    elif question_type == QuestionType.PARAMETER_IDENTIFY:
        return ParameterIdentifyEvaluator
    return None


def coerce_answer(data: Mapping[str, Any]) -> UserAnswer:
    """
    Build a UserAnswer, dropping fields whose values do not fit their type.

    A badly typed field reads as absent, so it only matters to the
    question types that grade it.
    """
    try:
        return UserAnswer.model_validate(data)
    except ValidationError as e:
        invalid = {error["loc"][0] for error in e.errors() if error["loc"]}
        if not invalid or not isinstance(data, Mapping):
            raise
        logger.debug("Ignoring malformed answer fields: %s", sorted(str(key) for key in invalid))
        return UserAnswer.model_validate(
            {key: value for key, value in data.items() if key not in invalid}
        )


def _coerce(question: QuestionInput, answer: AnswerInput, config: ConfigInput):
    if not isinstance(question, Question):
        question = Question.model_validate(question)
    if answer is None:
        answer = UserAnswer()
    elif not isinstance(answer, UserAnswer):
        answer = coerce_answer(answer)
    if config is None:
        config = DEFAULT_VALIDATION_CONFIG
    elif not isinstance(config, ValidationConfig):
        config = DEFAULT_VALIDATION_CONFIG.merged(config)
    return question, answer, config


def validate(
    question: QuestionInput,
    answer: AnswerInput,
    config: ConfigInput = None,
) -> ValidationResult:
    """
    Grade a learner's answer to a question.

    Args:
        question: Question specification (model or plain mapping)
        answer: Learner's answer (model or plain mapping)
        config: Grading policy, or a mapping of overrides on the defaults

    Returns:
        ValidationResult; identical inputs give identical scores,
        correctness and detail (feedback ids aside)

    Examples:
        >>> validate(
        ...     {"type": "numeric", "answer": {"value": 50, "unit": "N", "tolerance": 2}},
        ...     {"numericValue": 49, "unit": "N"},
        ... ).score
        100.0
    """
    try:
        question, answer, config = _coerce(question, answer, config)
    except ValidationError as e:
        logger.debug("Rejected malformed validation input: %s", e)
        return ValidationResult.rejected(
            FeedbackTarget.FINAL_ANSWER,
            "The question, answer or configuration is malformed",
            suggestion=f"{e.error_count()} field(s) failed validation",
        )

    evaluator_class = evaluator_for(question.type)
    if evaluator_class is None:
        logger.debug("Unsupported question type %r for question %r", question.type, question.id)
        return ValidationResult.rejected(
            FeedbackTarget.FINAL_ANSWER,
            "Unsupported question type",
            competencies=list(question.tags),
        )

    try:
        result = evaluator_class(question=question, config=config).evaluate(answer)
    except Exception:
        logger.exception(
            "%s failed on question %r", evaluator_class.__name__, question.id
        )
        return ValidationResult.rejected(
            FeedbackTarget.FINAL_ANSWER,
            "The answer could not be graded",
            competencies=list(question.tags),
        )

    if answer.time_spent is not None:
        result = result.model_copy(update={"time_spent": answer.time_spent})
    return result
