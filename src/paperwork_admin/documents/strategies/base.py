from __future__ import annotations

from abc import ABC, abstractmethod

from ...core.constants import DOCUMENT_SEQUENCE_WIDTH
from ...core.enums import DocumentType
from ..repository import DocumentRepository


def format_document_number(document_type: DocumentType, year: int, sequence: int) -> str:
    """``AGREEMENT/2024/001``: upper-cased type without underscores, year, 3-digit sequence."""
    return f"{document_type.number_prefix}/{year}/{sequence:0{DOCUMENT_SEQUENCE_WIDTH}d}"


class NumberingStrategy(ABC):
    """Strategy Pattern: decide the sequence part of a new document number."""

    @abstractmethod
    def next_sequence(self, *, document_type: DocumentType, year: int, documents: DocumentRepository) -> int:
        raise NotImplementedError
