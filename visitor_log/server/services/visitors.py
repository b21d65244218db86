from __future__ import annotations

from typing import Any, List

from visitor_log.core import monitoring
from visitor_log.core.errors import VisitorNotFoundError
from visitor_log.core.logging_config import get_logger
from visitor_log.core.models.domain import Visitor
from visitor_log.core.models.io import VisitorSummary
from visitor_log.core.repositories import VisitorRepository
from visitor_log.core.validation import parse_visitor_id, validate_sign_in

logger = get_logger(__name__)


class VisitorService:
    """
    Service layer for the visitor log.
    Validates input and translates repository results into domain errors for the API.
    """

    def __init__(self, repository: VisitorRepository) -> None:
        self.repository = repository

    def list_visitors(self) -> List[Visitor]:
        visitors = self.repository.list_all()
        logger.debug(f"Retrieved {len(visitors)} visitors")
        return visitors

    def get_visitor(self, raw_id: Any) -> Visitor:
        visitor_id = parse_visitor_id(raw_id)
        visitor = self.repository.get_by_id(visitor_id)
        if visitor is None:
            raise VisitorNotFoundError(visitor_id)
        return visitor

    def sign_in(self, name: Any, mobile: Any) -> Visitor:
        """
        Validate and store a new visitor.

        Raises:
            VisitorValidationError: if any field is invalid.
        """
        payload = validate_sign_in(name, mobile)
        visitor = self.repository.create(payload.name, payload.mobile)
        logger.info(f"Visitor {visitor.id} signed in at {visitor.login_time.isoformat()}")
        monitoring.log_visitor_signed_in(visitor.id)
        return visitor

    def sign_out(self, raw_id: Any) -> Visitor:
        """
        Record the sign-out of a visitor.

        Signing out an already signed-out visitor returns the record unchanged.

        Raises:
            InvalidVisitorIdError: if ``raw_id`` is not an integer.
            VisitorNotFoundError: if no such visitor exists.
        """
        visitor_id = parse_visitor_id(raw_id)
        visitor = self.repository.mark_logout(visitor_id)
        if visitor is None:
            raise VisitorNotFoundError(visitor_id)
        logger.info(f"Visitor {visitor.id} signed out at {visitor.logout_time.isoformat()}")
        monitoring.log_visitor_signed_out(visitor.id, visitor.duration_seconds)
        return visitor

    def summary(self) -> VisitorSummary:
        visitors = self.repository.list_all()
        active = sum(1 for visitor in visitors if visitor.is_active)
        return VisitorSummary(total=len(visitors), active=active, signed_out=len(visitors) - active)
