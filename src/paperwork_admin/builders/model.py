from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Builder:
    """Domain entity: a builder (property developer)."""

    builder_id: str
    name: str
    contact_person: str
    phone: str
    address: str
    created_at: datetime
    email: Optional[str] = None
    registration_number: Optional[str] = None
    documents: tuple[str, ...] = ()
