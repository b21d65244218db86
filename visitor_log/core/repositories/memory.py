"""In-memory visitor repository."""

from __future__ import annotations

import threading
from datetime import datetime
from typing import Callable, Dict, List, Optional

from visitor_log.core.logging_config import get_logger

from ..models.domain import Visitor, utc_now
from .base import VisitorRepository

logger = get_logger(__name__)


class InMemoryVisitorRepository(VisitorRepository):
    """Dict-backed repository; the default store and the one used in tests.

    A single lock guards id allocation and every access to the map, so
    concurrent request handlers never see a duplicated id or a torn update.
    """

    def __init__(self, clock: Callable[[], datetime] = utc_now) -> None:
        self._clock = clock
        self._visitors: Dict[int, Visitor] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def create(self, name: str, mobile: str) -> Visitor:
        with self._lock:
            visitor = Visitor(id=self._next_id, name=name, mobile=mobile, login_time=self._clock())
            self._next_id += 1
            self._visitors[visitor.id] = visitor
        logger.debug(f"Stored visitor {visitor.id}")
        return visitor

    def get_by_id(self, visitor_id: int) -> Optional[Visitor]:
        with self._lock:
            return self._visitors.get(visitor_id)

    def list_all(self) -> List[Visitor]:
        with self._lock:
            visitors = list(self._visitors.values())
        # id doubles as the insertion sequence for tie-breaking
        return sorted(visitors, key=lambda v: (v.login_time, v.id), reverse=True)

    def mark_logout(self, visitor_id: int) -> Optional[Visitor]:
        with self._lock:
            visitor = self._visitors.get(visitor_id)
            if visitor is None:
                return None
            if not visitor.is_active:
                logger.info(f"Visitor {visitor_id} already signed out at {visitor.logout_time.isoformat()}")
                return visitor
            updated = visitor.signed_out(self._clock())
            self._visitors[visitor_id] = updated
        return updated

    def __len__(self) -> int:
        with self._lock:
            return len(self._visitors)
