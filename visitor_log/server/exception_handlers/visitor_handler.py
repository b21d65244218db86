"""
Handlers translating visitor log errors into HTTP responses.

- VisitorValidationError and request body validation failures -> 400 with every failing field
- InvalidVisitorIdError -> 400
- VisitorNotFoundError -> 404
"""

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from visitor_log.core.errors import (
    InvalidVisitorIdError,
    VisitorLogError,
    VisitorNotFoundError,
    VisitorValidationError,
)
from visitor_log.core.logging_config import get_logger
from visitor_log.core.models.io import ErrorResponse, ValidationErrorResponse
from visitor_log.core.validation import field_errors_from

logger = get_logger(__name__)

VALIDATION_FAILED_MESSAGE = "Validation failed"
INVALID_ID_MESSAGE = "Invalid visitor ID"
NOT_FOUND_MESSAGE = "Visitor not found"


def _validation_response(response: ValidationErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=response.model_dump())


async def visitor_error_handler(request: Request, exc: VisitorLogError) -> JSONResponse:
    """Map a domain error onto its status code and a client-safe body."""
    logger.info(f"{request.method} {request.url.path} rejected: {exc}")

    if isinstance(exc, VisitorValidationError):
        return _validation_response(ValidationErrorResponse(message=VALIDATION_FAILED_MESSAGE, errors=exc.errors))
    if isinstance(exc, InvalidVisitorIdError):
        body = ErrorResponse(message=INVALID_ID_MESSAGE)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())
    if isinstance(exc, VisitorNotFoundError):
        body = ErrorResponse(message=NOT_FOUND_MESSAGE)
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=body.model_dump())

    # Unmapped subclasses are server bugs, not client errors
    logger.error(f"Unmapped visitor log error in {request.method} {request.url.path}: {exc!r}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(message="Internal server error").model_dump(),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report FastAPI request validation failures in the same shape as sign-in validation."""
    errors = field_errors_from(exc.errors())
    logger.info(f"{request.method} {request.url.path} failed validation: {[e.field for e in errors]}")
    return _validation_response(ValidationErrorResponse(message=VALIDATION_FAILED_MESSAGE, errors=errors))
