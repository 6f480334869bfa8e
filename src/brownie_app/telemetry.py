from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

TELEMETRY_CATEGORIES = {"navigation", "api_call_result", "mutation", "error"}
# Client names and amounts stay out of telemetry.
_FORBIDDEN_CONTEXT_KEYS = {"client", "cliente", "name", "value", "valor", "unit_price", "total_value"}


@dataclass(frozen=True)
class TelemetryEvent:
    category: str
    name: str
    view: str
    action: str
    timestamp_utc: str
    success: bool | None = None
    error_kind: str | None = None
    context: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        return {key: value for key, value in asdict(self).items() if value is not None}


def build_event(
    *,
    category: str,
    name: str,
    view: str,
    action: str,
    success: bool | None = None,
    error_kind: str | None = None,
    context: dict[str, Any] | None = None,
    now: datetime | None = None,
) -> TelemetryEvent:
    if category not in TELEMETRY_CATEGORIES:
        raise ValueError(f"Unsupported telemetry category: {category}")
    if context:
        illegal = sorted(key for key in context if key.lower() in _FORBIDDEN_CONTEXT_KEYS)
        if illegal:
            raise ValueError(f"Customer data keys are forbidden in telemetry context: {illegal}")
    return TelemetryEvent(
        category=category,
        name=name,
        view=view,
        action=action,
        timestamp_utc=(now or datetime.now(timezone.utc)).isoformat(),
        success=success,
        error_kind=error_kind,
        context=context,
    )


class TelemetryLogger:
    def __init__(self, *, app_name: str = "brownie_desk", enabled: bool = False, log_file: str | Path | None = None) -> None:
        self.app_name = app_name
        self.enabled = enabled
        self.log_file = Path(log_file) if log_file else Path("artifacts") / "telemetry" / f"{app_name}.jsonl"

    def emit(self, event: TelemetryEvent) -> bool:
        if not self.enabled:
            return False
        payload = event.to_dict()
        payload["app_name"] = self.app_name
        self.log_file.parent.mkdir(parents=True, exist_ok=True)
        with self.log_file.open("a", encoding="utf-8") as fp:
            fp.write(json.dumps(payload, sort_keys=True) + "\n")
        return True
