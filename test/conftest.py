from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from visitor_log.core.repositories import InMemoryVisitorRepository

EPOCH = datetime(2026, 10, 19, 9, 0, 0, tzinfo=timezone.utc)


class FakeClock:
    """Deterministic clock: each call returns the current instant, then advances by ``step``."""

    def __init__(self, start: datetime = EPOCH, step: timedelta = timedelta(seconds=1)) -> None:
        self.now = start
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + self.step
        return current

    def freeze(self) -> None:
        self.step = timedelta(0)

    def set(self, instant: datetime) -> None:
        self.now = instant


@pytest.fixture
def clock() -> FakeClock:
    """A clock advancing one second per reading."""
    return FakeClock()


@pytest.fixture
def repository(clock: FakeClock) -> InMemoryVisitorRepository:
    """A fresh in-memory repository driven by the fake clock."""
    return InMemoryVisitorRepository(clock=clock)
