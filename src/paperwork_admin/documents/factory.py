from __future__ import annotations

from dataclasses import dataclass

from ..core.exceptions import ValidationError
from .strategies.base import NumberingStrategy
from .strategies.count_strategy import CountNumberingStrategy
from .strategies.sequence_strategy import SequenceNumberingStrategy
from .workflow import ForwardOnlyTransitionPolicy, PermissiveTransitionPolicy, TransitionPolicy


@dataclass
class WorkflowPolicyFactory:
    """Factory Pattern: choose numbering and transition rules from settings."""

    def numbering(self, name: str = "count") -> NumberingStrategy:
        key = (name or "count").strip().lower()
        if key == "count":
            return CountNumberingStrategy()
        if key == "sequence":
            return SequenceNumberingStrategy()
        raise ValidationError(f"Unknown document numbering strategy: {name}")

    def transitions(self, *, strict: bool = False) -> TransitionPolicy:
        if strict:
            return ForwardOnlyTransitionPolicy()
        return PermissiveTransitionPolicy()
