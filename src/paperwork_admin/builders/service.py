from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable, Iterable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.patching import append_unique, merge_changes, unique_ids
from ..common.stats import DirectoryStats
from ..core.exceptions import NotFoundError
from .model import Builder
from .repository import BuilderRepository

logger = logging.getLogger(__name__)

_IMMUTABLE = frozenset({"builder_id", "created_at"})


class BuilderDirectory:
    """Use case: builder records keyed by name.

    Name lookups are exact. ``case_sensitive=False`` makes "ABC Corp" and
    "abc corp" resolve to the same builder.
    """

    def __init__(
        self,
        builders: BuilderRepository,
        *,
        case_sensitive: bool = True,
        clock: Callable[[], datetime] = now_local,
    ):
        self._builders = builders
        self._case_sensitive = bool(case_sensitive)
        self._clock = clock

    @property
    def case_sensitive(self) -> bool:
        return self._case_sensitive

    def create(
        self,
        *,
        name: str,
        contact_person: str = "",
        phone: str = "",
        address: str = "",
        email: Optional[str] = None,
        registration_number: Optional[str] = None,
        documents: Iterable[str] = (),
        builder_id: Optional[str] = None,
        created_at: Optional[datetime] = None,
    ) -> Builder:
        linked: tuple[str, ...] = ()
        for doc_id in documents:
            linked = append_unique(linked, doc_id)

        builder = Builder(
            builder_id=builder_id or self._builders.next_id(),
            name=name,
            contact_person=contact_person,
            phone=phone,
            address=address,
            email=email,
            registration_number=registration_number,
            documents=linked,
            created_at=created_at or self._clock(),
        )
        self._builders.add(builder)
        return builder

    def update(self, builder_id: str, /, **changes: Any) -> Builder:
        current = self.require(builder_id)
        if "documents" in changes:
            changes["documents"] = unique_ids(changes["documents"], "documents")
        updated = merge_changes(current, changes, immutable=_IMMUTABLE)
        if not self._builders.save(updated):
            raise NotFoundError(f"Builder {builder_id} not found")
        return updated

    def get_by_id(self, builder_id: str) -> Optional[Builder]:
        return self._builders.get_by_id(builder_id)

    def require(self, builder_id: str) -> Builder:
        builder = self._builders.get_by_id(builder_id)
        if not builder:
            raise NotFoundError(f"Builder {builder_id} not found")
        return builder

    def get_by_name(self, name: str) -> Optional[Builder]:
        return self._builders.find_by_name(name, case_sensitive=self._case_sensitive)

    get_by_key = get_by_name

    def link_document(self, builder_id: str, document_id: str) -> Builder:
        builder = self.require(builder_id)
        linked = append_unique(builder.documents, document_id)
        if linked == builder.documents:
            return builder
        return self.update(builder_id, documents=linked)

    def delete(self, builder_id: str) -> None:
        if not self._builders.delete_by_id(builder_id):
            raise NotFoundError(f"Builder {builder_id} not found")
        logger.info("Deleted builder %s", builder_id)

    def list_all(self) -> Sequence[Builder]:
        return self._builders.list_all()

    def search(self, term: str = "") -> list[Builder]:
        needle = (term or "").strip().lower()
        if not needle:
            return list(self._builders.list_all())
        return [
            b
            for b in self._builders.list_all()
            if needle in b.name.lower()
            or needle in b.contact_person.lower()
            or needle in b.phone
            or needle in (b.email or "").lower()
            or needle in (b.registration_number or "").lower()
        ]

    def stats(self) -> DirectoryStats:
        return DirectoryStats.from_entries(self._builders.list_all())
