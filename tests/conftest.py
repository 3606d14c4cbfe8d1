from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from paperwork_admin.container import build_container


class FakeClock:
    """Callable clock that only moves when a test tells it to."""

    def __init__(self, start: datetime):
        self.current = start

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **delta) -> None:
        self.current += timedelta(**delta)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 11, 20, 9, 30, 0)


@pytest.fixture
def clock(fixed_now) -> FakeClock:
    return FakeClock(fixed_now)


@pytest.fixture
def container(clock):
    return build_container(storage_backend="memory", clock=clock)
