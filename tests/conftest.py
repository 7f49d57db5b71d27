from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from src.workforce_records.workforce_records.container import build_container


class TickingClock:
    """Returns `start`, then advances one minute per call."""

    def __init__(self, start: datetime):
        self.current = start

    def __call__(self) -> datetime:
        now = self.current
        self.current = now + timedelta(minutes=1)
        return now


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 15, 9, 0, 0)


@pytest.fixture
def clock(fixed_now) -> TickingClock:
    return TickingClock(fixed_now)


@pytest.fixture
def container(clock):
    return build_container(storage_backend="memory", clock=clock)
