"""API models package."""

from .errors import (
    COMMON_RESPONSES,
    PROTECTED_RESPONSES,
    ErrorResponse,
    FieldError,
    ValidationErrorResponse,
)

__all__ = [
    "COMMON_RESPONSES",
    "PROTECTED_RESPONSES",
    "ErrorResponse",
    "FieldError",
    "ValidationErrorResponse",
]
