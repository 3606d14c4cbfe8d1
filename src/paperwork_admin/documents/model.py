from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import DocumentStatus, DocumentType, FileType


@dataclass(frozen=True)
class DocumentFile:
    """Attachment record (scan, photo or office document)."""

    file_id: str
    name: str
    file_type: FileType
    url: str
    uploaded_by: str
    uploaded_at: datetime


@dataclass(frozen=True)
class Document:
    """Domain entity: one property document moving through the workflow.

    Customer and builder fields are copies taken at creation time; editing the
    directory entries does not rewrite them.
    """

    document_id: str
    document_number: str
    document_type: DocumentType
    status: DocumentStatus
    customer_name: str
    customer_phone: str
    builder_name: str
    property_details: str
    created_at: datetime
    updated_at: datetime
    customer_email: Optional[str] = None
    assigned_to: Optional[str] = None
    collection_date: Optional[date] = None
    data_entry_date: Optional[date] = None
    registration_date: Optional[date] = None
    delivery_date: Optional[date] = None
    notes: tuple[str, ...] = ()
    files: tuple[DocumentFile, ...] = ()


@dataclass(frozen=True)
class DocumentStats:
    """Read model for the dashboard counters."""

    total: int
    pending_collection: int
    in_progress: int
    completed: int
