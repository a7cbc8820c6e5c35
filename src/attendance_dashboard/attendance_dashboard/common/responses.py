from __future__ import annotations

import logging
from dataclasses import asdict
from enum import Enum
from typing import Any

from flask import jsonify

from ..core.exceptions import DomainError, PayloadError, UpstreamError, ValidationError

logger = logging.getLogger(__name__)


def error_response(code: str, message: str, status: int, **extra: Any):
    body = {"error": code, "message": message}
    body.update(extra)
    return jsonify(body), status


def domain_error_response(exc: DomainError):
    """Map a domain exception to the JSON error body the dashboard shows."""

    if isinstance(exc, ValidationError):
        return error_response("VALIDATION_ERROR", str(exc), 400)
    if isinstance(exc, PayloadError):
        return error_response(exc.code, str(exc), 502)
    if isinstance(exc, UpstreamError):
        extra = {"status": exc.status, "details": exc.body} if exc.status is not None else {}
        return error_response(exc.code, str(exc), 502, **extra)
    logger.error("unmapped domain error: %s", exc)
    return error_response("SERVER_ERROR", str(exc), 500)


def to_json(obj: Any) -> Any:
    """Dataclasses (and lists/dicts of them) to plain JSON values."""

    if hasattr(obj, "__dataclass_fields__"):
        return {k: to_json(v) for k, v in asdict(obj).items()}
    if isinstance(obj, dict):
        return {k: to_json(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_json(v) for v in obj]
    if isinstance(obj, Enum):
        return obj.value
    return obj
