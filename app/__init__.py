"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and foundational application code.
"""

from app.config import settings, Settings
from app.exceptions import (
    ServiceError,
    ServiceValidationError,
    NotFoundError,
    UpstreamServiceError,
    UnexpectedServiceError,
)

__all__ = [
    "settings",
    "Settings",
    "ServiceError",
    "ServiceValidationError",
    "NotFoundError",
    "UpstreamServiceError",
    "UnexpectedServiceError",
]
