from __future__ import annotations

from typing import Optional, Sequence

from ..common.ids import next_display_id
from ..core.constants import CUSTOMER_ID_PREFIX, DIRECTORY_ID_WIDTH
from .model import Customer
from .repository import CustomerRepository


class InMemoryCustomerRepository(CustomerRepository):
    """Transient store; contents reset when the process restarts."""

    def __init__(self):
        self._items: dict[str, Customer] = {}
        self._issued: set[str] = set()

    def get_by_id(self, customer_id: str) -> Optional[Customer]:
        return self._items.get(customer_id)

    def find_by_phone(self, phone: str) -> Optional[Customer]:
        return next((c for c in self._items.values() if c.phone == phone), None)

    def find_by_email(self, email: str) -> Optional[Customer]:
        return next((c for c in self._items.values() if c.email == email), None)

    def list_all(self) -> Sequence[Customer]:
        return list(self._items.values())

    def next_id(self) -> str:
        return next_display_id(CUSTOMER_ID_PREFIX, self._issued, width=DIRECTORY_ID_WIDTH)

    def add(self, customer: Customer) -> None:
        self._items[customer.customer_id] = customer
        self._issued.add(customer.customer_id)

    def save(self, customer: Customer) -> bool:
        if customer.customer_id not in self._items:
            return False
        self._items[customer.customer_id] = customer
        return True

    def delete_by_id(self, customer_id: str) -> bool:
        return self._items.pop(customer_id, None) is not None

    def snapshot(self):
        return dict(self._items), set(self._issued)

    def restore(self, state) -> None:
        items, issued = state
        self._items = dict(items)
        self._issued = set(issued)
