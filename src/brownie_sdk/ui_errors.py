from __future__ import annotations

from dataclasses import dataclass

from .exceptions import ClientValidationError, GatewayError, NetworkError


@dataclass(frozen=True)
class UserFacingError:
    message: str
    details: str | None = None

    @property
    def technical_details(self) -> str | None:
        if self.details:
            return self.details
        return None


def to_user_facing_error(exc: GatewayError | ClientValidationError) -> UserFacingError:
    if isinstance(exc, ClientValidationError):
        return UserFacingError(message=str(exc), details="CLIENT_VALIDATION")
    primary = exc.message.strip() or "Request failed"
    if isinstance(exc, NetworkError):
        details = f"network: {exc.detail}" if exc.detail else "network"
    else:
        details = f"HTTP {exc.status_code}"
        if exc.detail:
            details = f"{details}: {exc.detail}"
    return UserFacingError(message=primary, details=details)
