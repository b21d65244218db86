"""
Visitor I/O models for API requests and responses.

This module contains Pydantic-based I/O schemas for the visitor endpoints.
These models define the contract between the API and the front-end form and
table: the sign-in payload, the visitor JSON shape (camelCase keys, ISO-8601
timestamps) and the error bodies.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from ..domain import Visitor

NAME_MAX_LENGTH = 100
MOBILE_PATTERN = re.compile(r"[0-9]{10}")


class VisitorCreate(BaseModel):
    """Schema for signing a visitor in via API."""

    name: str = Field(description="Visitor full name (1-100 characters)")
    mobile: str = Field(description="Mobile number, exactly 10 digits without separators")

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if len(value) == 0:
            raise PydanticCustomError("name_required", "Name is required")
        if len(value) > NAME_MAX_LENGTH:
            raise PydanticCustomError(
                "name_too_long",
                "Name must be at most {max_length} characters",
                {"max_length": NAME_MAX_LENGTH},
            )
        return value

    @field_validator("mobile")
    @classmethod
    def _check_mobile(cls, value: str) -> str:
        if MOBILE_PATTERN.fullmatch(value) is None:
            raise PydanticCustomError("mobile_invalid", "Please enter a valid 10-digit mobile number")
        return value


class VisitorRead(BaseModel):
    """Schema for reading a visitor record from API."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    mobile: str
    login_time: datetime = Field(alias="loginTime", description="Sign-in timestamp")
    logout_time: Optional[datetime] = Field(default=None, alias="logoutTime", description="Sign-out timestamp")

    @classmethod
    def from_domain(cls, visitor: Visitor) -> VisitorRead:
        return cls(
            id=visitor.id,
            name=visitor.name,
            mobile=visitor.mobile,
            login_time=visitor.login_time,
            logout_time=visitor.logout_time,
        )


class VisitorSummary(BaseModel):
    """Head-count of the visitor log."""

    model_config = ConfigDict(populate_by_name=True)

    total: int = Field(ge=0, description="Number of visitor records")
    active: int = Field(ge=0, description="Visitors still signed in")
    signed_out: int = Field(ge=0, alias="signedOut", description="Visitors who have signed out")


class FieldError(BaseModel):
    """One failing input field."""

    field: str = Field(description="Name of the offending field (or 'body')")
    message: str = Field(description="Human-readable problem description")
    type: str = Field(description="Machine-readable error code")


class ErrorResponse(BaseModel):
    """Error body for non-validation failures."""

    message: str


class ValidationErrorResponse(ErrorResponse):
    """Error body listing every failing field."""

    errors: List[FieldError] = Field(default_factory=list)
