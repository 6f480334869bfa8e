from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ViewStateStatus(str, Enum):
    LOADING = "loading"
    EMPTY = "empty"
    SUCCESS = "success"
    STALE = "stale"
    PARTIAL_ERROR = "partial_error"
    FATAL_ERROR = "fatal_error"


_MESSAGES = {
    ViewStateStatus.LOADING: "Loading...",
    ViewStateStatus.EMPTY: "Nothing to show yet",
    ViewStateStatus.SUCCESS: "Up to date",
    ViewStateStatus.STALE: "Showing the last loaded data; it may be out of date",
}


@dataclass(frozen=True)
class ViewState:
    status: ViewStateStatus
    message: str | None = None
    data_available: bool = False

    @property
    def shows_data(self) -> bool:
        return self.data_available and self.status is not ViewStateStatus.FATAL_ERROR

    def render(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "message": self.message,
            "data_available": self.data_available,
            "shows_data": self.shows_data,
        }


def resolve_state(*, is_loading: bool, error: str | None, has_data: bool, stale: bool = False) -> ViewState:
    """Collapse a view's flags into the one status the screen displays.

    Loading wins, then errors, then staleness. An error with data still on
    screen is partial, without data it is fatal.
    """
    if is_loading:
        status = ViewStateStatus.LOADING
    elif error:
        status = ViewStateStatus.PARTIAL_ERROR if has_data else ViewStateStatus.FATAL_ERROR
        return ViewState(status, error, data_available=has_data)
    elif stale:
        status = ViewStateStatus.STALE
    elif has_data:
        status = ViewStateStatus.SUCCESS
    else:
        status = ViewStateStatus.EMPTY
    return ViewState(status, _MESSAGES[status], data_available=has_data)
