from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from brownie_sdk import StockItem

from ..services.aggregates import StockTotals, stock_totals
from ..services.errors import OperationError
from ..services.refresh import gather_reads, run_mutation
from ..services.stock_service import StockService
from ..telemetry import TelemetryLogger, build_event
from .notification_center import NotificationCenter
from .view_state import resolve_state


@dataclass
class StockView:
    service: StockService
    telemetry: TelemetryLogger = field(default_factory=TelemetryLogger)
    notifications: NotificationCenter = field(default_factory=NotificationCenter)
    items: list[StockItem] = field(default_factory=list)
    categories: list[str] = field(default_factory=list)
    totals: StockTotals = field(default_factory=StockTotals)
    add_category: str = ""
    add_quantity: str = ""
    set_category: str = ""
    set_quantity: str = ""
    is_loading: bool = False
    is_submitting: bool = False
    stale: bool = False
    error_message: str | None = None
    success_message: str | None = None

    def load(self) -> bool:
        self.is_loading = True
        try:
            loaded = gather_reads({"stock": self.service.list_stock, "categories": self.service.list_categories})
        except OperationError as exc:
            self.error_message = exc.message
            self._emit_read(False, error_kind=exc.kind)
            return False
        finally:
            self.is_loading = False
        self.categories = list(loaded["categories"])
        self._replace_items(loaded["stock"])
        if self.add_category not in self.categories:
            self.add_category = self.categories[0] if self.categories else ""
        if self.set_category not in self.categories:
            self.set_category = self.categories[0] if self.categories else ""
        self.error_message = None
        self._emit_read(True)
        return True

    def add_stock(self, category: str | None = None, quantity: Any = None) -> dict[str, Any]:
        if category is not None:
            self.add_category = category
        if quantity is not None:
            self.add_quantity = str(quantity)
        chosen = self.add_category
        result = self._mutate(
            "stock.add",
            lambda: self.service.add_to_stock(chosen, self.add_quantity),
            success=lambda: f"Added {self.add_quantity} units to {chosen}.",
        )
        if result["ok"]:
            self.add_quantity = ""
        return result

    def set_stock(self, category: str | None = None, quantity: Any = None) -> dict[str, Any]:
        if category is not None:
            self.set_category = category
        if quantity is not None:
            self.set_quantity = str(quantity)
        chosen = self.set_category
        result = self._mutate(
            "stock.set",
            lambda: self.service.set_stock(chosen, self.set_quantity),
            success=lambda: f"Stock for {chosen} set to {self.set_quantity} units.",
        )
        if result["ok"]:
            self.set_quantity = ""
        return result

    def quantity_of(self, category: str) -> int:
        return self.totals.by_category.get(category, 0)

    def render(self) -> dict[str, Any]:
        state = resolve_state(
            is_loading=self.is_loading,
            error=self.error_message,
            has_data=bool(self.items),
            stale=self.stale,
        )
        return {
            "items": [{"category": item.category, "quantity": item.quantity} for item in self.items],
            "categories": list(self.categories),
            "total_units": self.totals.total_units,
            "add_form": {"category": self.add_category, "quantity": self.add_quantity},
            "set_form": {"category": self.set_category, "quantity": self.set_quantity},
            "is_submitting": self.is_submitting,
            "success_message": self.success_message,
            "error_message": self.error_message,
            "view_state": state.render(),
            "notifications": self.notifications.render(),
        }

    def _mutate(self, action: str, write: Callable[[], Any], *, success: Callable[[], str]) -> dict[str, Any]:
        if self.is_submitting:
            return {"ok": False, "error": "A stock update is already in progress"}
        self.is_submitting = True
        self.error_message = None
        self.success_message = None
        try:
            outcome = run_mutation(write, self.service.list_stock, action=action)
        finally:
            self.is_submitting = False
        if not outcome.committed:
            self.error_message = outcome.error.message
            self._emit_mutation(action, False, error_kind=outcome.error.kind)
            return {"ok": False, "error": outcome.error.message, "kind": outcome.error.kind, "not_applied": True}

        self.success_message = success()
        refresh_error = None
        if outcome.data is not None:
            self._replace_items(outcome.data)
        else:
            refresh_error = outcome.refresh_error.message
            self.stale = True
            self.notifications.push(
                level="warning",
                title="Stock saved",
                message=f"The change was saved but the stock list could not be reloaded: {refresh_error}",
            )
        self._emit_mutation(action, True)
        return {"ok": True, "message": self.success_message, "refresh_error": refresh_error}

    def _replace_items(self, items: list[StockItem]) -> None:
        self.items = list(items)
        self.totals = stock_totals(self.items)
        self.stale = False

    def _emit_read(self, success: bool, *, error_kind: str | None = None) -> None:
        self.telemetry.emit(
            build_event(
                category="api_call_result",
                name="stock_loaded",
                view="stock",
                action="stock.load",
                success=success,
                error_kind=error_kind,
            )
        )

    def _emit_mutation(self, action: str, success: bool, *, error_kind: str | None = None) -> None:
        self.telemetry.emit(
            build_event(
                category="mutation",
                name="mutation_result",
                view="stock",
                action=action,
                success=success,
                error_kind=error_kind,
            )
        )
