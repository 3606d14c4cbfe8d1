from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import DocumentType
from .model import Document
from .repository import DocumentRepository


class InMemoryDocumentRepository(DocumentRepository):
    def __init__(self):
        self._items: dict[str, Document] = {}

    def get_by_id(self, document_id: str) -> Optional[Document]:
        return self._items.get(document_id)

    def list_all(self) -> Sequence[Document]:
        return list(self._items.values())

    def count_by_type(self, document_type: DocumentType) -> int:
        return sum(1 for d in self._items.values() if d.document_type == document_type)

    def list_numbers(self, document_type: DocumentType) -> Sequence[str]:
        return [d.document_number for d in self._items.values() if d.document_type == document_type]

    def add(self, document: Document) -> None:
        self._items[document.document_id] = document

    def save(self, document: Document) -> bool:
        if document.document_id not in self._items:
            return False
        self._items[document.document_id] = document
        return True

    def delete_by_id(self, document_id: str) -> bool:
        return self._items.pop(document_id, None) is not None

    def snapshot(self):
        return dict(self._items)

    def restore(self, state) -> None:
        self._items = dict(state)
