"""
physgrade.answer - answer validation for statics and wave questions

Provides the grading pipeline with:
- One evaluator per question type
- Tolerance-based numeric comparison with partial credit
- Geometric matching of free-body diagram elements
- Weighted composite scoring for multi-step problems
- Structured feedback addressed to UI regions
"""

from .config import DEFAULT_VALIDATION_CONFIG, ValidationConfig
from .engine import evaluator_for, validate
from .evaluator import AnswerEvaluator
from .feedback import FeedbackBuilder
from .graders import CountNormalizedGrader, GradedStep, Grader
from .result import (
    DCLValidation,
    EquationValidation,
    FeedbackItem,
    FeedbackKind,
    FeedbackTarget,
    NumericValidation,
    ValidationResult,
    WaveSketchValidation,
)

__all__ = [
    "validate",
    "evaluator_for",
    "ValidationConfig",
    "DEFAULT_VALIDATION_CONFIG",
    "ValidationResult",
    "FeedbackItem",
    "FeedbackKind",
    "FeedbackTarget",
    "NumericValidation",
    "DCLValidation",
    "EquationValidation",
    "WaveSketchValidation",
    "AnswerEvaluator",
    "FeedbackBuilder",
    "Grader",
    "GradedStep",
    "CountNormalizedGrader",
]
