from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Customer


class CustomerRepository(Protocol):
    """Customer storage port; services depend on this, never on a concrete DB."""

    def get_by_id(self, customer_id: str) -> Optional[Customer]:
        raise NotImplementedError

    def find_by_phone(self, phone: str) -> Optional[Customer]:
        """First customer whose phone matches exactly."""

        raise NotImplementedError

    def find_by_email(self, email: str) -> Optional[Customer]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Customer]:
        raise NotImplementedError

    def next_id(self) -> str:
        raise NotImplementedError

    def add(self, customer: Customer) -> None:
        raise NotImplementedError

    def save(self, customer: Customer) -> bool:
        raise NotImplementedError

    def delete_by_id(self, customer_id: str) -> bool:
        raise NotImplementedError
