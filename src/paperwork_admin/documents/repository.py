from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import DocumentType
from .model import Document


class DocumentRepository(Protocol):
    def get_by_id(self, document_id: str) -> Optional[Document]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Document]:
        """All documents in creation order."""

        raise NotImplementedError

    def count_by_type(self, document_type: DocumentType) -> int:
        raise NotImplementedError

    def list_numbers(self, document_type: DocumentType) -> Sequence[str]:
        raise NotImplementedError

    def add(self, document: Document) -> None:
        raise NotImplementedError

    def save(self, document: Document) -> bool:
        raise NotImplementedError

    def delete_by_id(self, document_id: str) -> bool:
        raise NotImplementedError
