"""Services package"""

from .validation_service import ValidationService, get_validation_service

__all__ = [
    "ValidationService",
    "get_validation_service",
]
