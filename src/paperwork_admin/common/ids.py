from __future__ import annotations

import re
import uuid
from typing import Iterable

_SUFFIX = re.compile(r"(\d+)$")


def new_token(prefix: str) -> str:
    """Process-unique opaque id such as ``DOC3F9A0C12B7``."""
    return f"{prefix}{uuid.uuid4().hex[:12].upper()}"


def next_display_id(prefix: str, existing_ids: Iterable[str], *, width: int) -> str:
    """Next sequential display id (``CUST001``, ``CUST002``...).

    Uses the highest numeric suffix already issued, so deleting a record never
    causes an id to be handed out twice.
    """
    highest = 0
    for existing in existing_ids:
        if not existing.startswith(prefix):
            continue
        m = _SUFFIX.search(existing[len(prefix):])
        if m:
            highest = max(highest, int(m.group(1)))
    return f"{prefix}{highest + 1:0{width}d}"
