from __future__ import annotations

import threading

from ...core.enums import DocumentType
from ..repository import DocumentRepository
from .base import NumberingStrategy


class SequenceNumberingStrategy(NumberingStrategy):
    """Monotonic counter per (type, year), safe for concurrent creates.

    The first request for a key seeds the counter from the highest number
    already stored for that type and year.

    A number is consumed as soon as it is handed out. If the surrounding
    create is rolled back the counter stays advanced, leaving a gap in the
    sequence; numbers are never reused.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._counters: dict[tuple[DocumentType, int], int] = {}

    @staticmethod
    def _highest_stored(document_type: DocumentType, year: int, documents: DocumentRepository) -> int:
        marker = f"{document_type.number_prefix}/{year}/"
        highest = 0
        for number in documents.list_numbers(document_type):
            if not number.startswith(marker):
                continue
            tail = number[len(marker):]
            if tail.isdigit():
                highest = max(highest, int(tail))
        return highest

    def next_sequence(self, *, document_type: DocumentType, year: int, documents: DocumentRepository) -> int:
        key = (document_type, int(year))
        with self._lock:
            if key not in self._counters:
                self._counters[key] = self._highest_stored(document_type, year, documents)
            self._counters[key] += 1
            return self._counters[key]
