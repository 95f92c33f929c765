"""
Request and response models for the validation API.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from physgrade import Question, UserAnswer, ValidationConfig, ValidationResult


class ValidateRequest(BaseModel):
    """Request to grade one answer"""
    question: Question = Field(..., description="Question with its expected-answer specification")
    answer: UserAnswer = Field(..., description="Learner's structured answer")
    config: Optional[Dict[str, Any]] = Field(
        None, description="Grading policy overrides (camelCase or snake_case keys)"
    )


class ValidateResponse(BaseModel):
    """Grading response"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    result: Dict[str, Any]
    question_id: str

    @classmethod
    def from_domain(cls, question_id: str, result: ValidationResult) -> "ValidateResponse":
        """Convert domain result to response"""
        return cls(question_id=question_id, result=result.to_dict())


class ConfigDefaultsResponse(BaseModel):
    """Effective grading policy applied when a request has no overrides"""
    config: Dict[str, Any]

    @classmethod
    def from_domain(cls, config: ValidationConfig) -> "ConfigDefaultsResponse":
        return cls(config=config.model_dump(by_alias=True))
