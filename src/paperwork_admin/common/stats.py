from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Protocol


class _HasDocuments(Protocol):
    documents: tuple[str, ...]


@dataclass(frozen=True)
class DirectoryStats:
    """Summary cards shown above the customer and builder lists."""

    total: int
    with_documents: int
    without_documents: int
    total_documents: int

    @classmethod
    def from_entries(cls, entries: Iterable[_HasDocuments]) -> "DirectoryStats":
        total = 0
        with_documents = 0
        total_documents = 0
        for e in entries:
            total += 1
            if e.documents:
                with_documents += 1
            total_documents += len(e.documents)
        return cls(
            total=total,
            with_documents=with_documents,
            without_documents=total - with_documents,
            total_documents=total_documents,
        )
