from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable, Iterable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.patching import append_unique, merge_changes, unique_ids
from ..common.stats import DirectoryStats
from ..core.exceptions import NotFoundError
from .model import Customer
from .repository import CustomerRepository

logger = logging.getLogger(__name__)

_IMMUTABLE = frozenset({"customer_id", "created_at"})


class CustomerDirectory:
    """Use case: customer records keyed by phone number.

    Manual ``create`` does not check for an existing phone; only the document
    auto-provisioning path looks the phone up first.
    """

    def __init__(self, customers: CustomerRepository, *, clock: Callable[[], datetime] = now_local):
        self._customers = customers
        self._clock = clock

    def create(
        self,
        *,
        name: str,
        phone: str,
        address: str = "",
        email: Optional[str] = None,
        documents: Iterable[str] = (),
        customer_id: Optional[str] = None,
        created_at: Optional[datetime] = None,
    ) -> Customer:
        linked: tuple[str, ...] = ()
        for doc_id in documents:
            linked = append_unique(linked, doc_id)

        customer = Customer(
            customer_id=customer_id or self._customers.next_id(),
            name=name,
            phone=phone,
            email=email,
            address=address,
            documents=linked,
            created_at=created_at or self._clock(),
        )
        self._customers.add(customer)
        return customer

    def update(self, customer_id: str, /, **changes: Any) -> Customer:
        current = self.require(customer_id)
        if "documents" in changes:
            changes["documents"] = unique_ids(changes["documents"], "documents")
        updated = merge_changes(current, changes, immutable=_IMMUTABLE)
        if not self._customers.save(updated):
            raise NotFoundError(f"Customer {customer_id} not found")
        return updated

    def get_by_id(self, customer_id: str) -> Optional[Customer]:
        return self._customers.get_by_id(customer_id)

    def require(self, customer_id: str) -> Customer:
        customer = self._customers.get_by_id(customer_id)
        if not customer:
            raise NotFoundError(f"Customer {customer_id} not found")
        return customer

    def get_by_phone(self, phone: str) -> Optional[Customer]:
        return self._customers.find_by_phone(phone)

    get_by_key = get_by_phone

    def get_by_email(self, email: str) -> Optional[Customer]:
        return self._customers.find_by_email(email)

    def link_document(self, customer_id: str, document_id: str) -> Customer:
        customer = self.require(customer_id)
        linked = append_unique(customer.documents, document_id)
        if linked == customer.documents:
            return customer
        return self.update(customer_id, documents=linked)

    def delete(self, customer_id: str) -> None:
        """Remove the customer. Documents keep their copied name/phone."""

        if not self._customers.delete_by_id(customer_id):
            raise NotFoundError(f"Customer {customer_id} not found")
        logger.info("Deleted customer %s", customer_id)

    def list_all(self) -> Sequence[Customer]:
        return self._customers.list_all()

    def search(self, term: str = "") -> list[Customer]:
        needle = (term or "").strip().lower()
        if not needle:
            return list(self._customers.list_all())
        return [
            c
            for c in self._customers.list_all()
            if needle in c.name.lower()
            or needle in c.phone
            or needle in (c.email or "").lower()
            or needle in c.address.lower()
        ]

    def stats(self) -> DirectoryStats:
        return DirectoryStats.from_entries(self._customers.list_all())
