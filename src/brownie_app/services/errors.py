from __future__ import annotations

from dataclasses import dataclass

from pydantic import ValidationError as PydanticValidationError

from brownie_sdk import (
    ClientValidationError,
    GatewayError,
    NetworkError,
    NotFoundError,
    to_user_facing_error,
)


@dataclass
class OperationError(RuntimeError):
    message: str
    kind: str = "service"
    details: str | None = None

    def __str__(self) -> str:
        return self.message


def normalize_error(exc: Exception, fallback: str = "Unexpected client error") -> OperationError:
    if isinstance(exc, OperationError):
        return exc
    if isinstance(exc, ClientValidationError):
        return OperationError(message=str(exc), kind="validation", details="CLIENT_VALIDATION")
    if isinstance(exc, PydanticValidationError):
        reasons = "; ".join(str(error.get("msg")) for error in exc.errors())
        return OperationError(message=reasons or fallback, kind="validation", details="CLIENT_VALIDATION")
    if isinstance(exc, GatewayError):
        user_facing = to_user_facing_error(exc)
        if isinstance(exc, NetworkError):
            kind = "network"
        elif isinstance(exc, NotFoundError):
            kind = "not_found"
        else:
            kind = "service"
        return OperationError(message=user_facing.message, kind=kind, details=user_facing.technical_details)
    return OperationError(message=str(exc) or fallback, kind="unexpected")
