from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Customer:
    """Domain entity: a customer.

    ``phone`` is the lookup key used when documents auto-provision customers.
    ``documents`` keeps linked document ids in insertion order, without repeats.
    """

    customer_id: str
    name: str
    phone: str
    address: str
    created_at: datetime
    email: Optional[str] = None
    documents: tuple[str, ...] = ()
