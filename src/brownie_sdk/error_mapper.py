from __future__ import annotations

from typing import Any

from .exceptions import GatewayError, NotFoundError, ServiceError

GENERIC_FAILURE_MESSAGE = "Request failed"


def extract_detail(payload: Any) -> str | None:
    """Pull the human readable message out of a service error body.

    The service answers ``{"detail": "..."}`` for business errors and
    ``{"detail": [{"msg": ...}, ...]}`` for request validation errors.
    """
    if not isinstance(payload, dict):
        return None
    detail = payload.get("detail")
    if isinstance(detail, str) and detail.strip():
        return detail.strip()
    if isinstance(detail, list):
        messages = [str(item.get("msg")) for item in detail if isinstance(item, dict) and item.get("msg")]
        if messages:
            return "; ".join(messages)
    return None


def map_error(status_code: int, payload: Any, fallback_message: str | None = None) -> GatewayError:
    message = extract_detail(payload) or fallback_message or GENERIC_FAILURE_MESSAGE
    detail = payload.get("detail") if isinstance(payload, dict) else None
    mapped: type[GatewayError]
    if status_code == 404:
        mapped = NotFoundError
    else:
        mapped = ServiceError
    return mapped(
        message=message,
        status_code=status_code,
        detail=detail,
        raw_payload=payload,
    )
