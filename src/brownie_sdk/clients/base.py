from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..exceptions import ServiceError
from ..gateway import Payload, RemoteGateway


@dataclass
class BaseClient:
    gateway: RemoteGateway

    def _read(self, path: str, *, operation: str, fallback_message: str) -> Payload:
        return self.gateway.read(path, operation=operation, fallback_message=fallback_message).unwrap()

    def _write(self, path: str, body: dict[str, Any], *, operation: str, fallback_message: str) -> Payload:
        return self.gateway.write(path, body, operation=operation, fallback_message=fallback_message).unwrap()


def expect_list(payload: Payload, what: str) -> list[Any]:
    if not isinstance(payload, list):
        raise ServiceError(message=f"Expected {what} response to be a JSON array", detail=payload)
    return payload


def expect_object(payload: Payload, what: str) -> dict[str, Any]:
    if not isinstance(payload, dict):
        raise ServiceError(message=f"Expected {what} response to be a JSON object", detail=payload)
    return payload
