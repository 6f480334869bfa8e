from __future__ import annotations

from dataclasses import dataclass


@dataclass
class GatewayError(Exception):
    message: str
    status_code: int = 0
    detail: object | None = None
    raw_payload: object | None = None

    def __str__(self) -> str:
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class NetworkError(GatewayError):
    """The request never produced an HTTP response."""


class ServiceError(GatewayError):
    """Non-2xx response from the remote service."""


class NotFoundError(ServiceError):
    """404, e.g. no unit price registered for a category."""


@dataclass(frozen=True)
class ValidationIssue:
    field: str
    reason: str


class ClientValidationError(ValueError):
    def __init__(self, issues: list[ValidationIssue]) -> None:
        self.issues = issues
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if not self.issues:
            return "Validation failed"
        return "; ".join(f"{issue.field}: {issue.reason}" for issue in self.issues)
