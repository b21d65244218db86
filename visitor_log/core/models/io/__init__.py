"""API request/response schemas for the visitor endpoints."""

from .visitors import (
    ErrorResponse,
    FieldError,
    MOBILE_PATTERN,
    NAME_MAX_LENGTH,
    ValidationErrorResponse,
    VisitorCreate,
    VisitorRead,
    VisitorSummary,
)

__all__ = [
    "ErrorResponse",
    "FieldError",
    "MOBILE_PATTERN",
    "NAME_MAX_LENGTH",
    "ValidationErrorResponse",
    "VisitorCreate",
    "VisitorRead",
    "VisitorSummary",
]
