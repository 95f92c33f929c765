"""
Application configuration.

Centralized configuration management with environment variables.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from physgrade.answer import ValidationConfig


class Settings(BaseSettings):
    """Application settings"""

    # Application
    APP_NAME: str = "Physgrade Validation API"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"  # development, staging, production

    # API
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000

    # CORS
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]
    CORS_ALLOW_CREDENTIALS: bool = True
    CORS_ALLOW_METHODS: list[str] = ["*"]
    CORS_ALLOW_HEADERS: list[str] = ["*"]

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"  # json or text
    LOG_FILE: Optional[str] = None

    # Grading defaults
    VALIDATION_DEFAULT_TOLERANCE: float = 2.0
    VALIDATION_DEFAULT_TOLERANCE_TYPE: Literal["percent", "absolute"] = "percent"
    VALIDATION_ENABLE_PARTIAL_CREDIT: bool = True
    VALIDATION_REQUIRE_CORRECT_UNITS: bool = True
    VALIDATION_DCL_WEIGHT: float = 0.3
    VALIDATION_EQUATION_WEIGHT: float = 0.3
    VALIDATION_CALCULATION_WEIGHT: float = 0.4

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    def validation_config(self) -> ValidationConfig:
        """Base grading policy for requests that do not override it"""
        return ValidationConfig(
            default_numeric_tolerance=self.VALIDATION_DEFAULT_TOLERANCE,
            default_tolerance_type=self.VALIDATION_DEFAULT_TOLERANCE_TYPE,
            enable_partial_credit=self.VALIDATION_ENABLE_PARTIAL_CREDIT,
            require_correct_units=self.VALIDATION_REQUIRE_CORRECT_UNITS,
            dcl_weight=self.VALIDATION_DCL_WEIGHT,
            equation_weight=self.VALIDATION_EQUATION_WEIGHT,
            calculation_weight=self.VALIDATION_CALCULATION_WEIGHT,
        )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


# Global settings instance
settings = get_settings()
