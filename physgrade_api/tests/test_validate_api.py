"""
API integration tests.

Tests for API endpoints.
"""


def test_root_endpoint(client):
    """Test root endpoint"""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert "name" in data
    assert data["endpoints"]["validate"] == "/validate"


def test_health_check(client):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"


def test_config_defaults(client):
    """Test default grading policy endpoint"""
    response = client.get("/config/defaults")
    assert response.status_code == 200
    config = response.json()["config"]
    assert config["defaultNumericTolerance"] == 2.0
    assert config["defaultToleranceType"] == "percent"
    assert config["enablePartialCredit"] is True


def test_validate_correct_numeric_answer(client, numeric_question):
    """Test grading a correct numeric answer"""
    response = client.post(
        "/validate",
        json={
            "question": numeric_question,
            "answer": {"questionId": "q-reaction", "numericValue": 49.5, "unit": "N", "timeSpent": 30},
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["questionId"] == "q-reaction"
    result = data["result"]
    assert result["isCorrect"] is True
    assert result["score"] == 100
    assert result["timeSpent"] == 30
    assert result["numericValidation"]["isWithinTolerance"] is True
    assert result["feedback"][0]["kind"] == "success"
    assert "dclValidation" not in result


def test_validate_with_config_override(client, numeric_question):
    """Test that request config overrides apply"""
    payload = {
        "question": numeric_question,
        "answer": {"numericValue": 45, "unit": "N"},
    }

    partial = client.post("/validate", json=payload).json()["result"]
    strict = client.post("/validate", json={**payload, "config": {"enablePartialCredit": False}}).json()["result"]

    assert partial["score"] == 40
    assert strict["score"] == 0


def test_validate_zero_expected_value_serializes(client, numeric_question):
    """Test that an infinite percent error is returned as null"""
    numeric_question["answer"] = {"value": 0, "unit": "N", "tolerance": 2}
    response = client.post(
        "/validate",
        json={"question": numeric_question, "answer": {"numericValue": 3, "unit": "N"}},
    )

    assert response.status_code == 200
    assert response.json()["result"]["numericValidation"]["percentError"] is None


def test_validate_mcq(client, mcq_question):
    """Test grading a multiple-choice answer"""
    response = client.post(
        "/validate",
        json={"question": mcq_question, "answer": {"selectedOption": "a"}},
    )

    assert response.status_code == 200
    result = response.json()["result"]
    assert result["isCorrect"] is False
    assert result["feedback"][0]["suggestion"] == "The correct answer was: Two reactions"


def test_validate_unsupported_type(client):
    """Test that unknown question types are graded as unsupported"""
    response = client.post(
        "/validate",
        json={"question": {"id": "q-essay", "type": "essay"}, "answer": {}},
    )

    assert response.status_code == 200
    result = response.json()["result"]
    assert result["score"] == 0
    assert result["feedback"][0]["message"] == "Unsupported question type"


def test_validate_missing_answer(client, numeric_question):
    """Test that a request without an answer is rejected"""
    response = client.post("/validate", json={"question": numeric_question})

    assert response.status_code == 422
    data = response.json()
    assert data["error"]["type"] == "ValidationError"


def test_validate_question_mismatch(client, numeric_question):
    """Test answer submitted for another question"""
    response = client.post(
        "/validate",
        json={"question": numeric_question, "answer": {"questionId": "q-other", "numericValue": 50}},
    )

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["type"] == "QuestionMismatchError"
    assert error["details"]["answer_question_id"] == "q-other"


def test_validate_invalid_config(client, numeric_question):
    """Test invalid configuration overrides"""
    response = client.post(
        "/validate",
        json={
            "question": numeric_question,
            "answer": {"numericValue": 50, "unit": "N"},
            "config": {"dclWeight": 3},
        },
    )

    assert response.status_code == 422
    error = response.json()["error"]
    assert error["type"] == "ConfigurationError"
    assert error["details"]["errors"]
