"""Domain models for visitor records."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import ConfigDict, Field

from ..base import BaseSchema


def utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(timezone.utc)


class Visitor(BaseSchema):
    """
    A single visitor sign-in session.

    ``id`` and ``login_time`` are assigned by the repository at sign-in and never
    change. ``logout_time`` stays ``None`` while the visitor is on site and is set
    exactly once at sign-out.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    id: int = Field(gt=0)
    name: str
    mobile: str
    login_time: datetime
    logout_time: Optional[datetime] = None

    @property
    def is_active(self) -> bool:
        """A visitor without a logout timestamp is still on site."""
        return self.logout_time is None

    @property
    def duration_seconds(self) -> Optional[float]:
        if self.logout_time is None:
            return None
        return (self.logout_time - self.login_time).total_seconds()

    def signed_out(self, at: datetime) -> Visitor:
        """Return a copy of this record signed out at ``at``.

        The timestamp never precedes ``login_time``.
        """
        return self.model_copy(update={"logout_time": max(at, self.login_time)})
