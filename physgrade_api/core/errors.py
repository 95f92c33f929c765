"""
Application exceptions and error handling.

Defines custom exceptions and error handlers for consistent error responses.
The grading engine itself never raises; these cover the service around it.
"""

from typing import Any, Dict, Optional
from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder

from .logging import get_logger

logger = get_logger(__name__)


# Custom Exceptions

class PhysgradeError(Exception):
    """Base exception for service errors"""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class QuestionMismatchError(PhysgradeError):
    """Raised when an answer is submitted for a different question"""

    def __init__(self, question_id: str, answer_question_id: str):
        super().__init__(
            message=(
                f"Answer is for question '{answer_question_id}', "
                f"not '{question_id}'"
            ),
            status_code=status.HTTP_400_BAD_REQUEST,
            details={
                "question_id": question_id,
                "answer_question_id": answer_question_id,
            }
        )


class ConfigurationError(PhysgradeError):
    """Raised for invalid grading configuration overrides"""

    def __init__(self, message: str, errors: Optional[list] = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            details={"errors": errors} if errors else {}
        )


class ValidationFailedError(PhysgradeError):
    """Raised when an answer cannot be graded"""

    def __init__(self, question_id: str, error: str):
        super().__init__(
            message=f"Failed to validate answer for '{question_id}': {error}",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details={"question_id": question_id, "error": error}
        )


# Error Response Models

def create_error_response(
    error: Exception,
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
    include_details: bool = True
) -> JSONResponse:
    """Create standardized error response"""

    error_data = {
        "error": {
            "type": error.__class__.__name__,
            "message": str(error),
        }
    }

    if isinstance(error, PhysgradeError) and include_details and error.details:
        error_data["error"]["details"] = error.details

    log = logger.error if status_code >= 500 else logger.warning
    log(
        f"Error occurred: {error}",
        extra_data={
            "error_type": error.__class__.__name__,
            "status_code": status_code,
        },
        exc_info=status_code >= 500
    )

    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(error_data)
    )


# Exception Handlers

async def physgrade_error_handler(request: Request, exc: PhysgradeError) -> JSONResponse:
    """Handle PhysgradeError exceptions"""
    return create_error_response(exc, exc.status_code)


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle HTTPException exceptions"""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": {
                "type": "HTTPException",
                "message": exc.detail,
            }
        }
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle request validation errors"""
    logger.warning(
        "Validation error",
        extra_data={"errors": exc.errors()}
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": {
                "type": "ValidationError",
                "message": "Request validation failed",
                "details": jsonable_encoder(exc.errors())
            }
        }
    )


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected errors"""
    logger.exception(
        "Unexpected error occurred",
        extra_data={"path": request.url.path}
    )

    # Don't expose internal errors in production
    from .config import settings
    include_details = settings.DEBUG

    message = str(exc) if include_details else "An internal error occurred"

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": {
                "type": "InternalServerError",
                "message": message,
            }
        }
    )


def register_error_handlers(app):
    """Register error handlers with FastAPI app"""
    app.add_exception_handler(PhysgradeError, physgrade_error_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)
