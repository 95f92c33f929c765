"""
Shared pytest fixtures for the validation engine tests.

This module provides:
- Factories for question and answer records (camelCase, as the UI sends them)
- A reference beam diagram and its equilibrium equations
- Sampled wave curves standing in for free-hand sketches
"""

import math
from typing import Any

import pytest

from physgrade import Question, UserAnswer, ValidationConfig


@pytest.fixture
def make_question():
    """Factory building a Question from camelCase fields."""
    def _factory(question_type: str, **fields: Any) -> Question:
        data = {"id": f"q-{question_type}", "type": question_type, "tags": ["statics"]}
        data.update(fields)
        return Question.model_validate(data)
    return _factory


@pytest.fixture
def make_answer():
    """Factory building a UserAnswer from camelCase fields."""
    def _factory(**fields: Any) -> UserAnswer:
        return UserAnswer.model_validate(fields)
    return _factory


@pytest.fixture
def make_config():
    """Factory applying overrides to the default grading policy."""
    def _factory(**overrides: Any) -> ValidationConfig:
        return ValidationConfig().merged(overrides)
    return _factory


@pytest.fixture
def expected_force_answer() -> dict[str, Any]:
    """Reaction force of 50 N, 2% tolerance."""
    return {"variable": "R_A", "value": 50, "unit": "N", "tolerance": 2, "toleranceType": "percent"}


@pytest.fixture
def beam_schema() -> dict[str, Any]:
    """Simply supported beam: pin at the left end, roller at the right, load mid-span."""
    return {
        "type": "beam",
        "width": 200,
        "height": 100,
        "correctForces": [
            {"id": "f1", "name": "W", "magnitude": 100, "angle": 270, "applicationPoint": {"x": 100, "y": 50}},
            {"id": "f2", "name": "R_A", "angle": 90, "applicationPoint": {"x": 0, "y": 50}, "isUnknown": True},
            {"id": "f3", "name": "R_B", "angle": 90, "applicationPoint": {"x": 200, "y": 50}, "isUnknown": True},
        ],
        "correctSupports": [
            {"id": "s1", "type": "pin", "position": {"x": 0, "y": 50}, "reactions": ["R_Ax", "R_Ay"]},
            {"id": "s2", "type": "roller", "position": {"x": 200, "y": 50}, "reactions": ["R_By"]},
        ],
    }


@pytest.fixture
def correct_placed_forces() -> list[dict[str, Any]]:
    """Placed forces matching the beam diagram exactly."""
    return [
        {"id": "p1", "name": "W", "angle": 270, "applicationPoint": {"x": 100, "y": 50}},
        {"id": "p2", "name": "R_A", "angle": 90, "applicationPoint": {"x": 0, "y": 50}},
        {"id": "p3", "name": "R_B", "angle": 90, "applicationPoint": {"x": 200, "y": 50}},
    ]


@pytest.fixture
def correct_placed_supports() -> list[dict[str, Any]]:
    return [
        {"id": "ps1", "type": "pin", "position": {"x": 2, "y": 48}},
        {"id": "ps2", "type": "roller", "position": {"x": 198, "y": 51}},
    ]


@pytest.fixture
def equilibrium_equations() -> dict[str, Any]:
    return {"required": ["sum-fx", "sum-fy", "sum-ma"], "forms": []}


@pytest.fixture
def sample_wave():
    """
    Factory sampling y = A·sin(2πx/λ + φ) (or cos) at evenly spaced x.

    Returns a list of ``{"x", "y"}`` dicts as drawn points.
    """
    def _sample(
        amplitude: float = 2.0,
        wavelength: float = 4.0,
        phase: float = 0.0,
        wave_type: str = "sine",
        count: int = 81,
        x_max: float = 8.0,
    ) -> list[dict[str, float]]:
        func = math.cos if wave_type == "cosine" else math.sin
        points = []
        for i in range(count):
            x = x_max * i / (count - 1)
            points.append({"x": x, "y": amplitude * func(2 * math.pi * x / wavelength + phase)})
        return points
    return _sample
