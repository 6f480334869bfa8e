from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .exceptions import GatewayError
from .http_client import HttpClient

Payload = dict[str, Any] | list[Any] | int | float | str | None


@dataclass(frozen=True)
class GatewayResult:
    payload: Payload = None
    error: GatewayError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Payload:
        if self.error is not None:
            raise self.error
        return self.payload


@dataclass
class RemoteGateway:
    """Typed read/write calls whose failures always come back as a result value."""

    http: HttpClient
    module: str = "gateway"

    def read(self, path: str, *, operation: str | None = None, fallback_message: str | None = None) -> GatewayResult:
        return self._call("GET", path, None, operation, fallback_message)

    def write(
        self,
        path: str,
        body: dict[str, Any],
        *,
        operation: str | None = None,
        fallback_message: str | None = None,
    ) -> GatewayResult:
        return self._call("POST", path, body, operation, fallback_message)

    def _call(
        self,
        method: str,
        path: str,
        body: dict[str, Any] | None,
        operation: str | None,
        fallback_message: str | None,
    ) -> GatewayResult:
        try:
            payload = self.http.request(
                method,
                path,
                json_body=body,
                module=self.module,
                operation=operation or path,
                fallback_message=fallback_message,
            )
        except GatewayError as exc:
            return GatewayResult(error=exc)
        return GatewayResult(payload=payload)
