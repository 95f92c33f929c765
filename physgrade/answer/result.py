"""
Validation result data structures.

This module provides the ValidationResult class which encapsulates the
outcome of grading one answer, including:
- Score and partial credit (0 to 100)
- Coarse correctness flag
- Feedback items addressed to UI regions
- One typed detail record for the question type that was graded
"""

from __future__ import annotations

import json
import uuid
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class FeedbackKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    HINT = "hint"
    INFO = "info"


class FeedbackTarget(str, Enum):
    """UI region a feedback message concerns."""

    DCL_FORCES = "dcl-forces"
    DCL_SUPPORTS = "dcl-supports"
    DCL_DIRECTIONS = "dcl-directions"
    EQUATION_SELECTION = "equation-selection"
    EQUATION_TERMS = "equation-terms"
    EQUATION_SIGNS = "equation-signs"
    CALCULATION = "calculation"
    UNITS = "units"
    FINAL_ANSWER = "final-answer"
    WAVE_SHAPE = "wave-shape"
    WAVE_AMPLITUDE = "wave-amplitude"
    WAVE_WAVELENGTH = "wave-wavelength"
    WAVE_PHASE = "wave-phase"
    WAVE_PARAMETERS = "wave-parameters"


class _Frozen(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        use_enum_values=True,
        ser_json_inf_nan="null",
    )


def _new_id() -> str:
    return uuid.uuid4().hex


class FeedbackItem(_Frozen):
    """
    One message for the learner.

    ``id`` is unique per validation call and carries no meaning; callers
    must not rely on its value.
    """

    id: str = Field(default_factory=_new_id)
    kind: FeedbackKind
    target: FeedbackTarget
    message: str
    suggestion: Optional[str] = None


class NumericValidation(_Frozen):
    is_within_tolerance: bool
    percent_error: float
    absolute_error: float
    unit_correct: bool
    sign_correct: bool


class DCLValidation(_Frozen):
    forces_present: bool
    forces_correct: bool
    supports_correct: bool
    directions_correct: bool
    missing_forces: list[str] = Field(default_factory=list)
    extra_forces: list[str] = Field(default_factory=list)
    wrong_directions: list[str] = Field(default_factory=list)


class EquationValidation(_Frozen):
    equations_selected: bool
    equations_correct: bool
    terms_correct: bool = True
    signs_correct: bool = True
    missing_equations: list[str] = Field(default_factory=list)
    wrong_equations: list[str] = Field(default_factory=list)


class WaveSketchValidation(_Frozen):
    amplitude_correct: bool
    wavelength_correct: bool
    phase_correct: bool
    shape_correct: bool
    amplitude_error: float
    wavelength_error: float
    phase_error: float
    overall_accuracy: float


class ValidationResult(_Frozen):
    """
    Result of grading one answer.

    Attributes:
        is_correct: Coarse pass/fail (threshold depends on question type)
        score: Score from 0 to 100
        partial_credit: Credit awarded, 0 to 100 (equal to score today)
        feedback: Feedback items, in the order they were produced
        competencies_assessed: Competency tags exercised by the question
        numeric_validation / dcl_validation / equation_validation /
        wave_sketch_validation: At most one typed detail record
        time_spent: Seconds spent, echoed from the answer when known
    """

    is_correct: bool = False
    score: float = 0.0
    partial_credit: float = 0.0
    feedback: list[FeedbackItem] = Field(default_factory=list)
    competencies_assessed: list[str] = Field(default_factory=list)

    numeric_validation: Optional[NumericValidation] = None
    dcl_validation: Optional[DCLValidation] = None
    equation_validation: Optional[EquationValidation] = None
    wave_sketch_validation: Optional[WaveSketchValidation] = None

    time_spent: Optional[float] = None

    @field_validator("score", "partial_credit", mode="before")
    @classmethod
    def clamp_score(cls, v: Any) -> float:
        """Keep scores within [0, 100]."""
        if not isinstance(v, (int, float)):
            raise ValueError("score must be numeric")
        return max(0.0, min(100.0, float(v)))

    def is_partial_credit(self) -> bool:
        """Check if the answer earned some but not full credit."""
        return 0.0 < self.score < 100.0

    def messages(self, kind: FeedbackKind | str | None = None) -> list[str]:
        """Feedback messages, optionally filtered by kind."""
        kind = FeedbackKind(kind).value if kind is not None else None
        return [item.message for item in self.feedback if kind is None or item.kind == kind]

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to a dictionary for JSON responses.

        Uses the camelCase field names the UI expects and leaves out
        detail records that do not apply. Infinite errors become null.
        """
        return json.loads(self.model_dump_json(by_alias=True, exclude_none=True))

    @classmethod
    def graded(
        cls,
        *,
        is_correct: bool,
        score: float,
        feedback: list[FeedbackItem],
        competencies: list[str] | None = None,
        **detail: Any,
    ) -> ValidationResult:
        """
        Create a graded result (convenience factory).

        Partial credit mirrors the score.
        """
        return cls(
            is_correct=is_correct,
            score=score,
            partial_credit=score,
            feedback=feedback,
            competencies_assessed=competencies or [],
            **detail,
        )

    @classmethod
    def rejected(
        cls,
        target: FeedbackTarget,
        message: str,
        competencies: list[str] | None = None,
        suggestion: str | None = None,
        **detail: Any,
    ) -> ValidationResult:
        """
        Create a zero-score result with a single error item.

        Used for missing input, missing specification and unsupported
        question types.
        """
        item = FeedbackItem(
            kind=FeedbackKind.ERROR,
            target=target,
            message=message,
            suggestion=suggestion,
        )
        return cls.graded(
            is_correct=False,
            score=0,
            feedback=[item],
            competencies=competencies,
            **detail,
        )
