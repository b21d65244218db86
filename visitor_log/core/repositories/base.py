"""
Repository interface for visitor records.

The service layer depends on this contract instead of a concrete store, so a
durable backing store can replace the in-memory one without touching the API.

Contract guidelines
-------------------

- All methods are synchronous and return quickly.
- Identifiers are positive integers allocated by the repository, starting at 1
  and never reused for the lifetime of the repository.
- "Not found" is reported as ``None``, never as an exception.
- ``mark_logout`` on an already signed-out record is a no-op that returns the
  stored record unchanged.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.domain import Visitor


class VisitorRepository(ABC):
    """Persist and query visitor sign-in sessions."""

    @abstractmethod
    def create(self, name: str, mobile: str) -> Visitor:
        """Create a new visitor record stamped with the current time.

        Args:
            name: Validated visitor name
            mobile: Validated mobile number

        Returns:
            The stored record with its assigned id and no logout time
        """

    @abstractmethod
    def get_by_id(self, visitor_id: int) -> Optional[Visitor]:
        """Get a visitor by identifier.

        Returns:
            The record or None if not found
        """

    @abstractmethod
    def list_all(self) -> List[Visitor]:
        """List every visitor, most recent sign-in first.

        Ties on login time are broken by insertion order, later first.
        """

    @abstractmethod
    def mark_logout(self, visitor_id: int) -> Optional[Visitor]:
        """Sign a visitor out.

        Returns:
            The updated record, the unchanged record if already signed out,
            or None if not found
        """
