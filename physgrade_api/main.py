"""
FastAPI backend for the physgrade validation engine.

This service provides:
- Answer validation for all supported question types
- Structured logging
- Consistent error responses
- Dependency injection of the validation service
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware

from .core import (
    settings,
    setup_logging,
    get_logger,
    register_error_handlers,
)
from .models import ValidateRequest, ValidateResponse, ConfigDefaultsResponse
from .services import ValidationService, get_validation_service

# Setup logging
setup_logging()
logger = get_logger(__name__)


# Lifecycle management
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    logger.info(
        "Starting validation API",
        extra_data={
            "environment": settings.ENVIRONMENT,
            "debug": settings.DEBUG
        }
    )
    yield
    logger.info("Shutting down validation API")


# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    description="REST API grading structured answers to statics and wave questions",
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan
)

# Register error handlers
register_error_handlers(app)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=settings.CORS_ALLOW_METHODS,
    allow_headers=settings.CORS_ALLOW_HEADERS,
)


# Dependency injection
def get_validation_service_dep() -> ValidationService:
    """Get validation service instance"""
    return get_validation_service(settings.validation_config())


# API Routes

@app.get("/")
async def read_root():
    """API root endpoint"""
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "endpoints": {
            "validate": "/validate",
            "config_defaults": "/config/defaults",
            "health": "/health"
        }
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT
    }


@app.post("/validate", response_model=ValidateResponse)
async def validate_answer(
    request: ValidateRequest,
    service: ValidationService = Depends(get_validation_service_dep)
):
    """
    Grade a learner's answer.

    Args:
        request: Question, answer and optional grading overrides

    Returns:
        Validation result (camelCase) and the question id
    """
    logger.info(
        "Validation requested",
        extra_data={
            "question_id": request.question.id,
            "question_type": request.question.type,
        }
    )

    result = await service.validate_answer(
        request.question,
        request.answer,
        request.config
    )

    return ValidateResponse.from_domain(request.question.id, result)


@app.get("/config/defaults", response_model=ConfigDefaultsResponse)
async def get_config_defaults(
    service: ValidationService = Depends(get_validation_service_dep)
):
    """Grading policy applied when a request carries no overrides"""
    return ConfigDefaultsResponse.from_domain(service.base_config)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "physgrade_api.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )
