"""
Pytest configuration and fixtures.

Provides shared fixtures for testing the validation API.
"""

from typing import Any

import pytest
from fastapi.testclient import TestClient

from physgrade import DEFAULT_VALIDATION_CONFIG
from physgrade_api.main import app
from physgrade_api.services import ValidationService


@pytest.fixture
def client() -> TestClient:
    """FastAPI test client"""
    return TestClient(app)


@pytest.fixture
def validation_service() -> ValidationService:
    """Validation service with the library defaults"""
    return ValidationService(DEFAULT_VALIDATION_CONFIG)


@pytest.fixture
def numeric_question() -> dict[str, Any]:
    """Sample numeric question as the question bank stores it"""
    return {
        "id": "q-reaction",
        "type": "numeric",
        "title": "Reaction at A",
        "tags": ["equilibrium"],
        "answer": {"variable": "R_A", "value": 50, "unit": "N", "tolerance": 2, "toleranceType": "percent"},
    }


@pytest.fixture
def mcq_question() -> dict[str, Any]:
    return {
        "id": "q-pin",
        "type": "mcq",
        "tags": ["supports"],
        "options": [
            {"id": "a", "text": "One reaction", "isCorrect": False},
            {"id": "b", "text": "Two reactions", "isCorrect": True},
        ],
    }
