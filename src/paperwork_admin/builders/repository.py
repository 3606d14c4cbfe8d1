from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Builder


class BuilderRepository(Protocol):
    def get_by_id(self, builder_id: str) -> Optional[Builder]:
        raise NotImplementedError

    def find_by_name(self, name: str, *, case_sensitive: bool = True) -> Optional[Builder]:
        """First builder whose name equals ``name`` (whole-string match)."""

        raise NotImplementedError

    def list_all(self) -> Sequence[Builder]:
        raise NotImplementedError

    def next_id(self) -> str:
        raise NotImplementedError

    def add(self, builder: Builder) -> None:
        raise NotImplementedError

    def save(self, builder: Builder) -> bool:
        raise NotImplementedError

    def delete_by_id(self, builder_id: str) -> bool:
        raise NotImplementedError
