from __future__ import annotations

from ...core.enums import DocumentType
from ..repository import DocumentRepository
from .base import NumberingStrategy


class CountNumberingStrategy(NumberingStrategy):
    """Existing documents of the same type (any year) plus one.

    Point-in-time count: two creates racing on the same type can get the same
    number, and deletes let a number be reused.
    """

    def next_sequence(self, *, document_type: DocumentType, year: int, documents: DocumentRepository) -> int:
        return documents.count_by_type(document_type) + 1
