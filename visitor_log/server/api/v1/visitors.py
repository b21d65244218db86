"""
Visitor API Endpoints.

This module exposes the visitor log to the front-end form and table:
signing visitors in, listing them, and signing them out.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, status

from visitor_log.core.logging_config import get_logger
from visitor_log.core.models.io import (
    ErrorResponse,
    ValidationErrorResponse,
    VisitorCreate,
    VisitorRead,
    VisitorSummary,
)
from visitor_log.server.services.deps import VisitorServiceDep

logger = get_logger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=List[VisitorRead],
    summary="List Visitors",
    description="Retrieve every visitor record, most recent sign-in first.",
    response_description="A list of visitor records.",
    responses={
        200: {"description": "Visitors retrieved successfully"},
        500: {"model": ErrorResponse, "description": "Unexpected internal error"},
    },
)
async def list_visitors(service: VisitorServiceDep) -> List[VisitorRead]:
    """
    List all visitors.

    Records are sorted by sign-in time, newest first. Visitors signed in at the
    same instant are ordered by insertion, later first. Signing a visitor out
    does not change their position.
    """
    return [VisitorRead.from_domain(visitor) for visitor in service.list_visitors()]


@router.post(
    "",
    response_model=VisitorRead,
    status_code=status.HTTP_201_CREATED,
    summary="Sign In Visitor",
    description="Create a visitor record stamped with the current time.",
    response_description="The created visitor record with its assigned ID.",
    responses={
        201: {"description": "Visitor signed in"},
        400: {"model": ValidationErrorResponse, "description": "One or more fields are invalid"},
    },
)
async def sign_in_visitor(payload: VisitorCreate, service: VisitorServiceDep) -> VisitorRead:
    """
    Sign a visitor in.

    - **name**: 1 to 100 characters.
    - **mobile**: exactly 10 digits, no spaces or separators.
    """
    visitor = service.sign_in(payload.name, payload.mobile)
    return VisitorRead.from_domain(visitor)


@router.get(
    "/summary",
    response_model=VisitorSummary,
    summary="Visitor Head-count",
    description="Count all, active and signed-out visitors.",
)
async def visitor_summary(service: VisitorServiceDep) -> VisitorSummary:
    return service.summary()


@router.get(
    "/{visitor_id}",
    response_model=VisitorRead,
    summary="Get Visitor",
    description="Retrieve a single visitor record by its identifier.",
    responses={
        400: {"model": ErrorResponse, "description": "Identifier is not an integer"},
        404: {"model": ErrorResponse, "description": "No visitor with this identifier"},
    },
)
async def get_visitor(visitor_id: str, service: VisitorServiceDep) -> VisitorRead:
    return VisitorRead.from_domain(service.get_visitor(visitor_id))


@router.patch(
    "/{visitor_id}/logout",
    response_model=VisitorRead,
    summary="Sign Out Visitor",
    description="Record the sign-out time of a visitor.",
    response_description="The updated visitor record.",
    responses={
        200: {"description": "Visitor signed out (or already signed out)"},
        400: {"model": ErrorResponse, "description": "Identifier is not an integer"},
        404: {"model": ErrorResponse, "description": "No visitor with this identifier"},
    },
)
async def sign_out_visitor(visitor_id: str, service: VisitorServiceDep) -> VisitorRead:
    """
    Sign a visitor out.

    The first sign-out time is kept: repeating the call returns the record unchanged.
    """
    return VisitorRead.from_domain(service.sign_out(visitor_id))
