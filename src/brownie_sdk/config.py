from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

TRUE_VALUES = {"1", "true", "yes", "on"}


class ConfigError(ValueError):
    """A BROWNIE_* setting is missing or out of range."""


@dataclass(frozen=True)
class ClientConfig:
    env_name: str
    api_base_url: str
    connect_timeout_seconds: float = 5.0
    read_timeout_seconds: float = 15.0
    max_connections: int = 10
    verify_ssl: bool = True


def _env(name: str, default: str) -> str:
    return (os.getenv(name) or default).strip()


def _positive(name: str, default: str, kind: type[float] | type[int] = float) -> float | int:
    raw = _env(name, default)
    try:
        value = kind(raw)
    except ValueError as exc:
        expected = "an integer" if kind is int else "a number"
        raise ConfigError(f"Invalid {name}: expected {expected}, got {raw!r}") from exc
    if value <= 0:
        raise ConfigError(f"Invalid {name}: expected > 0, got {value}")
    return value


def load_config(env_file: str | None = None) -> ClientConfig:
    """Build the client configuration from the environment and an optional .env file.

    ``BROWNIE_API_BASE_URL_<ENV>`` takes precedence over ``BROWNIE_API_BASE_URL``
    so one .env can describe several deployments.
    """
    load_dotenv(env_file)

    env_name = _env("BROWNIE_ENV", "dev")
    base_url = _env(f"BROWNIE_API_BASE_URL_{env_name.upper()}", "") or _env("BROWNIE_API_BASE_URL", "")
    if not base_url:
        raise ConfigError("Missing required config value: BROWNIE_API_BASE_URL")

    timeout = _positive("BROWNIE_TIMEOUT_SECONDS", "10")
    connect = _positive("BROWNIE_CONNECT_TIMEOUT_SECONDS", str(min(timeout, 5.0)))
    read = _positive("BROWNIE_READ_TIMEOUT_SECONDS", str(max(timeout, connect)))

    return ClientConfig(
        env_name=env_name,
        api_base_url=base_url.rstrip("/"),
        connect_timeout_seconds=float(connect),
        read_timeout_seconds=float(read),
        max_connections=int(_positive("BROWNIE_MAX_CONNECTIONS", "10", int)),
        verify_ssl=_env("BROWNIE_VERIFY_SSL", "true").lower() in TRUE_VALUES,
    )
