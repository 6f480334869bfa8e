from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from brownie_sdk import PaidChargeRecord

from ..services.billing_service import BillingService
from ..services.errors import OperationError
from ..services.pagination import PageWindow, PaginationState, goto_page, next_page, paginate, prev_page
from .formatting import format_currency, format_date
from .view_state import resolve_state


@dataclass
class HistoryView:
    """Paid charges, paged locally over the full fetched history."""

    service: BillingService
    page_size: int = 8
    records: list[PaidChargeRecord] = field(default_factory=list)
    pagination: PaginationState | None = None
    is_loading: bool = False
    error_message: str | None = None

    def __post_init__(self) -> None:
        if self.pagination is None:
            self.pagination = PaginationState(page_size=self.page_size)

    def load(self) -> bool:
        self.is_loading = True
        try:
            records = self.service.paid_history()
        except OperationError as exc:
            self.error_message = exc.message
            return False
        finally:
            self.is_loading = False
        self.records = list(records)
        self.pagination.resize(len(self.records))
        self.error_message = None
        return True

    def next_page(self) -> dict[str, Any]:
        next_page(self.pagination)
        return self.render()

    def previous_page(self) -> dict[str, Any]:
        prev_page(self.pagination)
        return self.render()

    def goto(self, page: int) -> dict[str, Any]:
        goto_page(self.pagination, page)
        return self.render()

    def window(self) -> PageWindow[PaidChargeRecord]:
        return paginate(self.records, self.pagination.page_size, self.pagination.page)

    def render(self) -> dict[str, Any]:
        window = self.window()
        state = resolve_state(is_loading=self.is_loading, error=self.error_message, has_data=bool(self.records))
        return {
            "records": [
                {
                    "client": record.client,
                    "due_date": format_date(record.due_date),
                    "value": format_currency(record.value),
                    "status": record.status,
                }
                for record in window.visible
            ],
            "page": window.page,
            "total_pages": window.total_pages,
            "total_items": window.total_items,
            "controls": {
                "visible": window.total_pages > 1,
                "previous_enabled": window.has_previous,
                "next_enabled": window.has_next,
            },
            "view_state": state.render(),
        }
