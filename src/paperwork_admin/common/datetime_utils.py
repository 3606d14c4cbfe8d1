from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def next_timestamp(now: datetime, previous: Optional[datetime]) -> datetime:
    """Return ``now`` unless it does not move past ``previous``.

    updated_at must strictly increase per record even when two mutations land
    on the same clock tick.
    """
    if previous is not None and now <= previous:
        return previous + timedelta(microseconds=1)
    return now
