from __future__ import annotations

from typing import Optional, Sequence

from ..common.ids import next_display_id
from ..core.constants import BUILDER_ID_PREFIX, DIRECTORY_ID_WIDTH
from .model import Builder
from .repository import BuilderRepository


class InMemoryBuilderRepository(BuilderRepository):
    def __init__(self):
        self._items: dict[str, Builder] = {}
        self._issued: set[str] = set()

    def get_by_id(self, builder_id: str) -> Optional[Builder]:
        return self._items.get(builder_id)

    def find_by_name(self, name: str, *, case_sensitive: bool = True) -> Optional[Builder]:
        if case_sensitive:
            return next((b for b in self._items.values() if b.name == name), None)
        folded = name.casefold()
        return next((b for b in self._items.values() if b.name.casefold() == folded), None)

    def list_all(self) -> Sequence[Builder]:
        return list(self._items.values())

    def next_id(self) -> str:
        return next_display_id(BUILDER_ID_PREFIX, self._issued, width=DIRECTORY_ID_WIDTH)

    def add(self, builder: Builder) -> None:
        self._items[builder.builder_id] = builder
        self._issued.add(builder.builder_id)

    def save(self, builder: Builder) -> bool:
        if builder.builder_id not in self._items:
            return False
        self._items[builder.builder_id] = builder
        return True

    def delete_by_id(self, builder_id: str) -> bool:
        return self._items.pop(builder_id, None) is not None

    def snapshot(self):
        return dict(self._items), set(self._issued)

    def restore(self, state) -> None:
        items, issued = state
        self._items = dict(items)
        self._issued = set(issued)
