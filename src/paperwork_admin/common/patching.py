from __future__ import annotations

from dataclasses import fields, replace
from typing import Any, Mapping, TypeVar

from ..core.exceptions import ValidationError

T = TypeVar("T")


def merge_changes(entity: T, changes: Mapping[str, Any], *, immutable: frozenset[str]) -> T:
    """Return a copy of a frozen dataclass with ``changes`` merged in.

    Only supplied fields change. Identity fields listed in ``immutable`` and
    names that are not fields of the entity are rejected.
    """
    known = {f.name for f in fields(entity)}
    locked = sorted(set(changes) & immutable)
    if locked:
        raise ValidationError(f"Field cannot be changed: {', '.join(locked)}")
    unknown = sorted(set(changes) - known)
    if unknown:
        raise ValidationError(f"Unknown field: {', '.join(unknown)}")
    return replace(entity, **changes)


def append_unique(items: tuple[str, ...], value: str) -> tuple[str, ...]:
    if value in items:
        return items
    return items + (value,)


def text_tuple(values: Any, field_name: str) -> tuple[str, ...]:
    """Coerce a list of strings to a tuple; a bare string is rejected, not split."""
    if not isinstance(values, (list, tuple)) or not all(isinstance(v, str) for v in values):
        raise ValidationError(f"{field_name} must be a list of strings")
    return tuple(values)


def unique_ids(values: Any, field_name: str) -> tuple[str, ...]:
    linked: tuple[str, ...] = ()
    for value in text_tuple(values, field_name):
        linked = append_unique(linked, value)
    return linked
