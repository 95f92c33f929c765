"""API models package"""

from .api import ValidateRequest, ValidateResponse, ConfigDefaultsResponse

__all__ = [
    "ValidateRequest",
    "ValidateResponse",
    "ConfigDefaultsResponse",
]
