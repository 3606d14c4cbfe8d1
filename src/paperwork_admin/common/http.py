from __future__ import annotations

import logging
from typing import Any

from flask import jsonify, request

from ..core.exceptions import InvalidTransitionError, NotFoundError, ValidationError
from .serialization import to_json
from .validators import require_payload

logger = logging.getLogger(__name__)


def ok(data: Any, status: int = 200):
    return jsonify({"success": True, "data": to_json(data)}), status


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def json_body() -> dict:
    return dict(require_payload(request.get_json(silent=True)))


def error_response(e: Exception, *, action: str):
    """Map domain errors to HTTP status codes; anything else is a 500."""

    if isinstance(e, ValidationError):
        return fail(str(e), 400)
    if isinstance(e, NotFoundError):
        return fail(str(e), 404)
    if isinstance(e, InvalidTransitionError):
        return fail(str(e), 409)
    logger.exception("Unexpected error while trying to %s", action)
    return fail(f"System error while trying to {action}", 500)
