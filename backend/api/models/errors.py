"""
Error response models.

Documents the error envelope produced by api.errors for the OpenAPI
schema.
"""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str


class FieldError(BaseModel):
    """One invalid field."""

    field: str
    message: str


class ValidationErrorResponse(BaseModel):
    """Validation error response format."""

    error: str = "Validation error"
    details: list[FieldError]


COMMON_RESPONSES = {
    400: {"model": ValidationErrorResponse, "description": "Invalid request"},
    500: {"model": ErrorResponse, "description": "Internal error"},
}

PROTECTED_RESPONSES = {
    **COMMON_RESPONSES,
    401: {"model": ErrorResponse, "description": "Missing, invalid or expired token"},
    403: {"model": ErrorResponse, "description": "Not allowed"},
}
