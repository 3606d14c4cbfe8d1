from __future__ import annotations

from abc import ABC, abstractmethod

from ..core.enums import DocumentStatus
from ..core.exceptions import InvalidTransitionError

# Display order of the workflow. Only the forward-only policy enforces it.
STATUS_ORDER: tuple[DocumentStatus, ...] = tuple(DocumentStatus)

IN_PROGRESS_STATUSES = frozenset(
    {
        DocumentStatus.COLLECTED,
        DocumentStatus.DATA_ENTRY_PENDING,
        DocumentStatus.DATA_ENTRY_COMPLETED,
        DocumentStatus.REGISTRATION_PENDING,
    }
)


def status_choices() -> list[dict]:
    return [{"value": s.value, "label": s.label} for s in STATUS_ORDER]


def next_status(status: DocumentStatus) -> DocumentStatus | None:
    idx = STATUS_ORDER.index(status)
    return STATUS_ORDER[idx + 1] if idx + 1 < len(STATUS_ORDER) else None


class TransitionPolicy(ABC):
    @abstractmethod
    def check(self, current: DocumentStatus, target: DocumentStatus) -> None:
        """Raise InvalidTransitionError if ``current -> target`` is not allowed."""

        raise NotImplementedError


class PermissiveTransitionPolicy(TransitionPolicy):
    """Any status may follow any other (default)."""

    def check(self, current: DocumentStatus, target: DocumentStatus) -> None:
        return None


class ForwardOnlyTransitionPolicy(TransitionPolicy):
    """Strict mode: stay put or advance exactly one step."""

    def check(self, current: DocumentStatus, target: DocumentStatus) -> None:
        if target == current or target == next_status(current):
            return
        raise InvalidTransitionError(f"Cannot move document from {current.value} to {target.value}")
