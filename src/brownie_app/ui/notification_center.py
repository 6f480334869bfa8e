from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

LEVELS = ("info", "success", "warning", "error")


@dataclass
class NotificationCenter:
    """Transient notices shown above a view; newest last."""

    messages: list[dict[str, Any]] = field(default_factory=list)
    limit: int = 20

    def push(self, *, level: str, title: str, message: str, details: dict[str, Any] | None = None) -> dict[str, Any]:
        if level not in LEVELS:
            raise ValueError(f"Unsupported notification level: {level}")
        notice = {"level": level, "title": title, "message": message, "details": details or {}}
        self.messages.append(notice)
        del self.messages[: max(len(self.messages) - self.limit, 0)]
        return notice

    def latest(self, level: str | None = None) -> dict[str, Any] | None:
        for notice in reversed(self.messages):
            if level is None or notice["level"] == level:
                return notice
        return None

    def dismiss(self, index: int) -> bool:
        if 0 <= index < len(self.messages):
            del self.messages[index]
            return True
        return False

    def clear(self) -> None:
        self.messages.clear()

    def render(self) -> dict[str, Any]:
        return {"count": len(self.messages), "messages": list(self.messages)}
