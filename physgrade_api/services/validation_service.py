"""
Validation service for answer grading.

Applies the service's grading policy and request overrides, checks that
the answer belongs to the question, then grades with the engine.
"""

from typing import Any, Dict, Optional

from pydantic import ValidationError

from physgrade import Question, UserAnswer, ValidationConfig, ValidationResult, validate

from ..core.errors import ConfigurationError, QuestionMismatchError, ValidationFailedError
from ..core.logging import get_context_logger, get_logger

logger = get_logger(__name__)


class ValidationService:
    """
    Service for answer validation.

    Grades learner answers against question specifications and returns
    explainable results.
    """

    def __init__(self, base_config: ValidationConfig):
        self.base_config = base_config

        logger.info(
            "ValidationService initialized",
            extra_data={
                "default_tolerance": base_config.default_numeric_tolerance,
                "tolerance_type": base_config.default_tolerance_type,
            }
        )

    def resolve_config(self, overrides: Optional[Dict[str, Any]] = None) -> ValidationConfig:
        """
        Merge request overrides onto the base policy.

        Raises:
            ConfigurationError: If an override value is invalid
        """
        try:
            return self.base_config.merged(overrides)
        except ValidationError as e:
            raise ConfigurationError(
                "Invalid validation configuration",
                errors=e.errors(include_url=False, include_context=False),
            )

    async def validate_answer(
        self,
        question: Question,
        answer: UserAnswer,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> ValidationResult:
        """
        Grade one answer.

        Args:
            question: Question specification
            answer: Learner's answer
            overrides: Optional grading policy overrides

        Returns:
            ValidationResult from the engine

        Raises:
            QuestionMismatchError: If the answer names a different question
            ConfigurationError: If the overrides are invalid
            ValidationFailedError: If grading fails unexpectedly
        """
        if answer.question_id and question.id and answer.question_id != question.id:
            raise QuestionMismatchError(question.id, answer.question_id)

        config = self.resolve_config(overrides)

        log = get_context_logger(__name__, question_id=question.id)
        log.info(
            "Validating answer",
            extra_data={
                "question_type": question.type,
                "has_overrides": bool(overrides),
            }
        )

        # validate() reports grading failures as results; only a programming
        # error in the engine itself reaches this handler
        try:
            result = validate(question, answer, config)
        except Exception as e:
            log.error(
                "Failed to validate answer",
                extra_data={"error": str(e)},
                exc_info=True
            )
            raise ValidationFailedError(question.id, str(e))

        log.info(
            "Validation completed",
            extra_data={
                "score": result.score,
                "is_correct": result.is_correct,
                "feedback_items": len(result.feedback),
            }
        )

        return result


# Factory function
def get_validation_service(base_config: Optional[ValidationConfig] = None) -> ValidationService:
    """Create validation service instance"""
    if base_config is None:
        from ..core.config import get_settings
        base_config = get_settings().validation_config()
    return ValidationService(base_config)
