"""
physgrade - answer validation engine for statics and wave problems

Grades learners' structured answers (multiple choice, numeric values with
units, free-body diagrams, equilibrium equation choices, multi-step
solutions, drawn waves and wave parameters) into explainable results.

    from physgrade import validate

    result = validate(question, user_answer)
    result.score, result.is_correct, result.feedback
"""

from .answer import (
    DEFAULT_VALIDATION_CONFIG,
    FeedbackItem,
    FeedbackKind,
    FeedbackTarget,
    ValidationConfig,
    ValidationResult,
    validate,
)
from .models import Question, QuestionType, UserAnswer

__version__ = "0.1.0"

__all__ = [
    "validate",
    "ValidationConfig",
    "DEFAULT_VALIDATION_CONFIG",
    "ValidationResult",
    "FeedbackItem",
    "FeedbackKind",
    "FeedbackTarget",
    "Question",
    "QuestionType",
    "UserAnswer",
]
