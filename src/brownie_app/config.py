from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


class AppConfigError(ValueError):
    """Raised when app level configuration is invalid."""


@dataclass(frozen=True)
class AppConfig:
    history_page_size: int = 8
    deadline_options: tuple[int, ...] = (7, 15, 30)
    default_deadline_days: int = 7
    telemetry_enabled: bool = False


def _read_positive_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        value = int(raw)
    except (TypeError, ValueError) as exc:
        raise AppConfigError(f"Invalid {name}: expected an integer, got {raw!r}") from exc
    if value <= 0:
        raise AppConfigError(f"Invalid {name}: expected > 0, got {value}")
    return value


def _read_deadlines(name: str, default: str) -> tuple[int, ...]:
    raw = os.getenv(name, default)
    try:
        options = tuple(int(part) for part in raw.split(",") if part.strip())
    except ValueError as exc:
        raise AppConfigError(f"Invalid {name}: expected comma separated integers, got {raw!r}") from exc
    if not options or any(option <= 0 for option in options):
        raise AppConfigError(f"Invalid {name}: expected positive day offsets, got {raw!r}")
    return options


def load_app_config(env_file: str | None = None) -> AppConfig:
    load_dotenv(env_file)

    page_size = _read_positive_int("BROWNIE_HISTORY_PAGE_SIZE", "8")
    deadline_options = _read_deadlines("BROWNIE_DEADLINE_OPTIONS", "7,15,30")
    default_deadline = _read_positive_int("BROWNIE_DEFAULT_DEADLINE_DAYS", str(deadline_options[0]))
    if default_deadline not in deadline_options:
        raise AppConfigError(
            f"Invalid BROWNIE_DEFAULT_DEADLINE_DAYS: {default_deadline} is not one of {list(deadline_options)}"
        )
    telemetry = os.getenv("BROWNIE_TELEMETRY_ENABLED", "0").strip().lower() in {"1", "true", "yes", "on"}

    return AppConfig(
        history_page_size=page_size,
        deadline_options=deadline_options,
        default_deadline_days=default_deadline,
        telemetry_enabled=telemetry,
    )
