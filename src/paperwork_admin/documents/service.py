from __future__ import annotations

import logging
from contextlib import nullcontext
from dataclasses import replace
from datetime import datetime
from typing import Any, Callable, ContextManager, Optional, Sequence

from ..builders.service import BuilderDirectory
from ..common.datetime_utils import next_timestamp, now_local
from ..common.ids import new_token
from ..common.patching import merge_changes, text_tuple
from ..core.constants import (
    DEFAULT_UPLOADED_BY,
    DOCUMENT_ID_PREFIX,
    FILE_ID_PREFIX,
    PLACEHOLDER_ADDRESS,
    PLACEHOLDER_CONTACT_PERSON,
    PLACEHOLDER_PHONE,
)
from ..core.enums import DocumentStatus, DocumentType, FileType
from ..core.exceptions import NotFoundError, ValidationError
from ..customers.service import CustomerDirectory
from .model import Document, DocumentFile, DocumentStats
from .repository import DocumentRepository
from .strategies.base import NumberingStrategy, format_document_number
from .strategies.count_strategy import CountNumberingStrategy
from .workflow import IN_PROGRESS_STATUSES, PermissiveTransitionPolicy, TransitionPolicy

logger = logging.getLogger(__name__)

_IMMUTABLE = frozenset({"document_id", "document_number", "created_at", "updated_at"})


def _coerce_type(value: Any) -> DocumentType:
    try:
        return DocumentType(value)
    except ValueError:
        raise ValidationError(f"Unknown document type: {value}")


def _coerce_status(value: Any) -> DocumentStatus:
    try:
        return DocumentStatus(value)
    except ValueError:
        raise ValidationError(f"Unknown document status: {value}")


class DocumentWorkflowService:
    """Use case: document lifecycle plus customer/builder auto-provisioning.

    The service is a plain merge store: apart from enum values and identity
    fields it does not validate input. Field checks belong to the controller.

    ``transaction`` returns a context manager that makes the document,
    customer and builder writes of ``create`` all-or-nothing.
    """

    def __init__(
        self,
        documents: DocumentRepository,
        customers: CustomerDirectory,
        builders: BuilderDirectory,
        *,
        numbering: Optional[NumberingStrategy] = None,
        transitions: Optional[TransitionPolicy] = None,
        transaction: Callable[[], ContextManager[Any]] = nullcontext,
        clock: Callable[[], datetime] = now_local,
    ):
        self._documents = documents
        self._customers = customers
        self._builders = builders
        self._numbering = numbering or CountNumberingStrategy()
        self._transitions = transitions or PermissiveTransitionPolicy()
        self._transaction = transaction
        self._clock = clock

    def create(
        self,
        *,
        document_type: Any,
        customer_name: str = "",
        customer_phone: str = "",
        builder_name: str = "",
        property_details: str = "",
        customer_email: Optional[str] = None,
        assigned_to: Optional[str] = None,
        document_number: Optional[str] = None,
        status: Any = None,
        now: Optional[datetime] = None,
    ) -> Document:
        doc_type = _coerce_type(document_type)
        now = now or self._clock()
        if status is not None:
            logger.debug("Ignoring status %r on create; new documents start at pending_collection", status)

        with self._transaction():
            number = document_number or format_document_number(
                doc_type,
                now.year,
                self._numbering.next_sequence(document_type=doc_type, year=now.year, documents=self._documents),
            )
            document = Document(
                document_id=new_token(DOCUMENT_ID_PREFIX),
                document_number=number,
                document_type=doc_type,
                status=DocumentStatus.PENDING_COLLECTION,
                customer_name=customer_name or "",
                customer_phone=customer_phone or "",
                customer_email=customer_email,
                builder_name=builder_name or "",
                property_details=property_details or "",
                assigned_to=assigned_to,
                created_at=now,
                updated_at=now,
            )

            self._provision_customer(document)
            self._provision_builder(document)
            self._documents.add(document)

        logger.info("Created document %s (%s)", document.document_number, document.document_id)
        return document

    def _provision_customer(self, document: Document) -> None:
        if not (document.customer_name and document.customer_phone):
            return

        customer = self._customers.get_by_phone(document.customer_phone)
        if customer:
            self._customers.link_document(customer.customer_id, document.document_id)
            return

        # No address is collected with the document; the property stands in for it.
        created = self._customers.create(
            name=document.customer_name,
            phone=document.customer_phone,
            email=document.customer_email,
            address=document.property_details,
            documents=[document.document_id],
        )
        logger.info("Auto-created customer %s for document %s", created.customer_id, document.document_id)

    def _provision_builder(self, document: Document) -> None:
        if not document.builder_name:
            return

        builder = self._builders.get_by_name(document.builder_name)
        if builder:
            self._builders.link_document(builder.builder_id, document.document_id)
            return

        created = self._builders.create(
            name=document.builder_name,
            contact_person=PLACEHOLDER_CONTACT_PERSON,
            phone=PLACEHOLDER_PHONE,
            address=PLACEHOLDER_ADDRESS,
            documents=[document.document_id],
        )
        logger.info("Auto-created builder %s with placeholder contact details", created.builder_id)

    def update(self, document_id: str, /, **changes: Any) -> Document:
        """Merge-patch the supplied fields; ``updated_at`` is always refreshed."""

        current = self.require(document_id)

        if "document_type" in changes:
            changes["document_type"] = _coerce_type(changes["document_type"])
        if "status" in changes:
            target = _coerce_status(changes["status"])
            self._transitions.check(current.status, target)
            changes["status"] = target
        if "notes" in changes:
            changes["notes"] = text_tuple(changes["notes"], "notes")
        if "files" in changes:
            files = changes["files"]
            if not isinstance(files, (list, tuple)) or not all(isinstance(f, DocumentFile) for f in files):
                raise ValidationError("files must be added through the upload endpoint")
            changes["files"] = tuple(files)

        merged = merge_changes(current, changes, immutable=_IMMUTABLE)
        updated = replace(merged, updated_at=next_timestamp(self._clock(), current.updated_at))
        if not self._documents.save(updated):
            raise NotFoundError(f"Document {document_id} not found")
        return updated

    def update_status(self, document_id: str, status: Any) -> Document:
        return self.update(document_id, status=status)

    def add_note(self, document_id: str, text: str) -> Document:
        current = self.require(document_id)
        return self.update(document_id, notes=current.notes + (text,))

    def attach_file(
        self,
        document_id: str,
        *,
        name: str,
        url: str,
        content_type: str = "",
        uploaded_by: str = DEFAULT_UPLOADED_BY,
        file_type: Optional[FileType] = None,
    ) -> DocumentFile:
        current = self.require(document_id)
        attachment = DocumentFile(
            file_id=new_token(FILE_ID_PREFIX),
            name=name,
            file_type=file_type or (FileType.PHOTO if "image" in (content_type or "") else FileType.DOCUMENT),
            url=url,
            uploaded_by=uploaded_by,
            uploaded_at=self._clock(),
        )
        self.update(document_id, files=current.files + (attachment,))
        return attachment

    def delete(self, document_id: str) -> None:
        """Remove the document.

        Customer/builder ``documents`` lists are left untouched and may keep
        the stale id.
        """

        if not self._documents.delete_by_id(document_id):
            raise NotFoundError(f"Document {document_id} not found")
        logger.info("Deleted document %s", document_id)

    def get(self, document_id: str) -> Optional[Document]:
        return self._documents.get_by_id(document_id)

    def require(self, document_id: str) -> Document:
        document = self._documents.get_by_id(document_id)
        if not document:
            raise NotFoundError(f"Document {document_id} not found")
        return document

    def list_documents(
        self,
        *,
        status: Any = None,
        document_type: Any = None,
        search: Optional[str] = None,
        assigned_to: Optional[str] = None,
    ) -> Sequence[Document]:
        wanted_status = _coerce_status(status) if status else None
        wanted_type = _coerce_type(document_type) if document_type else None
        needle = (search or "").strip().lower()

        out: list[Document] = []
        for d in self._documents.list_all():
            if wanted_status and d.status != wanted_status:
                continue
            if wanted_type and d.document_type != wanted_type:
                continue
            if assigned_to and d.assigned_to != assigned_to:
                continue
            if needle and not (
                needle in d.document_number.lower()
                or needle in d.customer_name.lower()
                or needle in d.builder_name.lower()
            ):
                continue
            out.append(d)
        return out

    def stats(self) -> DocumentStats:
        docs = self._documents.list_all()
        return DocumentStats(
            total=len(docs),
            pending_collection=sum(1 for d in docs if d.status == DocumentStatus.PENDING_COLLECTION),
            in_progress=sum(1 for d in docs if d.status in IN_PROGRESS_STATUSES),
            completed=sum(1 for d in docs if d.status == DocumentStatus.DELIVERED),
        )
