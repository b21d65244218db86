"""Error types for the visitor log.

Defines a small hierarchy of exceptions raised by validation and the service
layer. The server translates each kind into its HTTP status.
"""

from __future__ import annotations

from typing import List, Sequence, Union

from .models.io import FieldError


class VisitorLogError(Exception):
    """Base error for all visitor log exceptions."""


class VisitorValidationError(VisitorLogError):
    """Raised when sign-in input fails validation; carries every failing field."""

    def __init__(self, errors: Sequence[FieldError]) -> None:
        self.errors: List[FieldError] = list(errors)
        fields = ", ".join(error.field for error in self.errors)
        super().__init__(f"Validation failed for: {fields}")

    @property
    def fields(self) -> List[str]:
        return [error.field for error in self.errors]


class InvalidVisitorIdError(VisitorLogError):
    """Raised when a visitor identifier cannot be parsed as an integer."""

    def __init__(self, raw_id: object) -> None:
        self.raw_id = raw_id
        super().__init__(f"Invalid visitor ID: {raw_id!r}")


class VisitorNotFoundError(VisitorLogError):
    """Raised when no visitor record exists for an identifier."""

    def __init__(self, visitor_id: Union[int, str]) -> None:
        self.visitor_id = visitor_id
        super().__init__(f"Visitor not found: {visitor_id}")
