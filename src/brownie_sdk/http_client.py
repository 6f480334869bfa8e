from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any
from urllib.parse import urljoin

import requests
from requests.adapters import HTTPAdapter

from .config import ClientConfig
from .error_mapper import map_error
from .exceptions import NetworkError, ServiceError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CallRecord:
    resource: str
    operation: str
    result: str
    duration_ms: int
    status_code: int | None = None


@dataclass
class HttpClient:
    """One JSON round trip per call: no retries, no caching."""

    config: ClientConfig
    session: requests.Session | None = None
    last_call: CallRecord | None = None

    def __post_init__(self) -> None:
        if self.session is None:
            pool = self.config.max_connections
            self.session = requests.Session()
            self.session.mount("http://", HTTPAdapter(pool_connections=pool, pool_maxsize=pool, max_retries=0))
            self.session.mount("https://", HTTPAdapter(pool_connections=pool, pool_maxsize=pool, max_retries=0))

    def url_for(self, path: str) -> str:
        return urljoin(self.config.api_base_url.rstrip("/") + "/", path.lstrip("/"))

    def request(
        self,
        method: str,
        path: str,
        *,
        json_body: dict[str, Any] | None = None,
        module: str = "unknown",
        operation: str = "unknown",
        fallback_message: str | None = None,
    ) -> dict[str, Any] | list[Any] | int | float | str | None:
        started = time.monotonic()
        try:
            response = self.session.request(
                method=method.upper(),
                url=self.url_for(path),
                headers={"Accept": "application/json"},
                json=json_body,
                timeout=(self.config.connect_timeout_seconds, self.config.read_timeout_seconds),
                verify=self.config.verify_ssl,
            )
        except requests.RequestException as exc:
            self._record(module, operation, started, "network_error", None)
            raise NetworkError(
                message=fallback_message or "Could not reach the service",
                detail=f"{type(exc).__name__}: {exc}",
            ) from exc

        if not response.ok:
            self._record(module, operation, started, "error", response.status_code)
            try:
                body = response.json()
            except ValueError:
                body = {"message": response.text}
            raise map_error(response.status_code, body, fallback_message)

        self._record(module, operation, started, "success", response.status_code)
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise ServiceError(
                message=fallback_message or "Service returned an unreadable response",
                status_code=response.status_code,
                detail=response.text,
            ) from exc

    def _record(self, module: str, operation: str, started: float, result: str, status_code: int | None) -> None:
        self.last_call = CallRecord(
            resource=module,
            operation=operation,
            result=result,
            duration_ms=int((time.monotonic() - started) * 1000),
            status_code=status_code,
        )
        logger.info(
            "gateway_call",
            extra={
                "resource": module,
                "operation": operation,
                "result": result,
                "status_code": status_code,
                "duration_ms": self.last_call.duration_ms,
            },
        )
