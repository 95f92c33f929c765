"""
Step graders for composite questions.

Graders combine the scores of the sub-steps a learner actually answered
into one question score.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict, Field

from physgrade.math import round_score

from .result import ValidationResult


class GradedStep(BaseModel):
    """One answered sub-step with its configured weight."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    name: str
    result: ValidationResult
    weight: float = Field(default=1.0, ge=0)

    @property
    def score(self) -> float:
        return self.result.score


class Grader(BaseModel, ABC):
    """
    Abstract base class for step graders.

    Graders take the graded sub-steps and compute an overall score
    (0 to 100).
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    @abstractmethod
    def grade(self, steps: list[GradedStep]) -> int:
        """
        Compute the overall score from individual step results.

        Args:
            steps: Steps that were answered, in grading order

        Returns:
            Overall score (0 to 100)
        """


class CountNormalizedGrader(Grader):
    """
    Weighted sum divided by the number of answered steps.

    Weights need not sum to 1: only answered steps contribute, and the
    sum is normalized by how many there are, not by the weights.
    Unanswered steps neither count nor penalize.
    """

    def grade(self, steps: list[GradedStep]) -> int:
        if not steps:
            return 0
        total = sum(step.score * step.weight for step in steps)
        return round_score(total / len(steps))

