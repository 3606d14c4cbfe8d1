from __future__ import annotations

from enum import Enum


class DocumentType(str, Enum):
    """Kinds of property paperwork the office handles."""

    AGREEMENT = "agreement"
    LEASE_DEED = "lease_deed"
    SALE_DEED = "sale_deed"
    MUTATION = "mutation"
    PARTITION_DEED = "partition_deed"
    GIFT_DEED = "gift_deed"

    @property
    def number_prefix(self) -> str:
        return self.value.upper().replace("_", "")


class DocumentStatus(str, Enum):
    """Workflow states, declared in their intended processing order."""

    PENDING_COLLECTION = "pending_collection"
    COLLECTED = "collected"
    DATA_ENTRY_PENDING = "data_entry_pending"
    DATA_ENTRY_COMPLETED = "data_entry_completed"
    REGISTRATION_PENDING = "registration_pending"
    REGISTERED = "registered"
    READY_FOR_DELIVERY = "ready_for_delivery"
    DELIVERED = "delivered"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


class FileType(str, Enum):
    SCAN = "scan"
    PHOTO = "photo"
    DOCUMENT = "document"
