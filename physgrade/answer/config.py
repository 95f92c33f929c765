"""
Validation configuration.

Grading policy knobs shared by all evaluators. Only the multi-step
evaluator reads the step weights. ``require_correct_sign`` and
``significant_figures_check`` are accepted but not consulted by any
evaluator: sign is always checked and significant figures never are.
"""

from __future__ import annotations

from typing import Any, Literal, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ValidationConfig(BaseModel):
    """Grading policy for one validation call."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    default_numeric_tolerance: float = Field(
        default=2.0, ge=0, description="Default tolerance (percent points in percent mode)"
    )
    default_tolerance_type: Literal["percent", "absolute"] = "percent"

    enable_partial_credit: bool = True
    dcl_weight: float = Field(default=0.3, ge=0, le=1)
    equation_weight: float = Field(default=0.3, ge=0, le=1)
    calculation_weight: float = Field(default=0.4, ge=0, le=1)

    require_correct_units: bool = True
    require_correct_sign: bool = True
    significant_figures_check: bool = False

    @field_validator("default_tolerance_type", mode="before")
    @classmethod
    def normalize_tolerance_type(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    def merged(self, overrides: Mapping[str, Any] | None) -> ValidationConfig:
        """
        Return a copy with overrides applied.

        Override keys may use either the Python or the camelCase names.
        Unknown keys are ignored.

        Raises:
            pydantic.ValidationError: If an override value is invalid
        """
        if not overrides:
            return self
        aliases = {name: field.alias or name for name, field in type(self).model_fields.items()}
        data = self.model_dump(by_alias=True)
        for key, value in overrides.items():
            data[aliases.get(key, key)] = value
        return type(self).model_validate(data)


DEFAULT_VALIDATION_CONFIG = ValidationConfig()
