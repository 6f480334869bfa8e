from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from brownie_sdk import BillingOverviewResponse, Charge

from ..services.aggregates import FinancialSummary, filter_charges_by_client, summarize_charges
from ..services.billing_service import BillingService
from ..services.errors import OperationError
from ..services.refresh import run_mutation
from ..services.sales_service import Clock, utc_now
from ..telemetry import TelemetryLogger, build_event
from .formatting import format_currency, format_date
from .notification_center import NotificationCenter
from .view_state import resolve_state

logger = logging.getLogger(__name__)

OVERDUE_LABEL = "Vencido"
PENDING_LABEL = "Pendente"
STALE_AFTER_PAYMENT = (
    "The payment was recorded but the charge list could not be reloaded. "
    "It may still show the paid charge until the next refresh."
)


@dataclass
class BillingView:
    service: BillingService
    clock: Clock = utc_now
    telemetry: TelemetryLogger = field(default_factory=TelemetryLogger)
    notifications: NotificationCenter = field(default_factory=NotificationCenter)
    charges: list[Charge] = field(default_factory=list)
    summary: FinancialSummary = field(default_factory=FinancialSummary)
    search_term: str = ""
    is_loading: bool = False
    paying_charge_id: int | None = None
    stale: bool = False
    error_message: str | None = None

    def load(self) -> bool:
        self.is_loading = True
        try:
            overview = self.service.pending_overview()
        except OperationError as exc:
            self.error_message = exc.message
            self._emit("api_call_result", "billing.load", False, error_kind=exc.kind)
            return False
        finally:
            self.is_loading = False
        self._replace(overview)
        self.error_message = None
        self._emit("api_call_result", "billing.load", True)
        return True

    def search(self, term: str | None) -> dict[str, Any]:
        self.search_term = (term or "").strip()
        return self.render()

    def visible_charges(self) -> list[Charge]:
        return filter_charges_by_client(self.charges, self.search_term)

    def mark_paid(self, charge_id: int) -> dict[str, Any]:
        if self.paying_charge_id is not None:
            return {"ok": False, "error": "Another payment is being recorded"}
        charge = next((item for item in self.charges if item.id == charge_id), None)
        if charge is None:
            return {"ok": False, "error": f"Charge {charge_id} is not in the unpaid list"}

        self.paying_charge_id = charge_id
        try:
            outcome = run_mutation(
                lambda: self.service.mark_paid(charge),
                self.service.pending_overview,
                action="billing.mark_paid",
            )
        finally:
            self.paying_charge_id = None

        if not outcome.committed:
            self.notifications.push(level="error", title="Payment not recorded", message=outcome.error.message)
            self._emit("mutation", "billing.mark_paid", False, error_kind=outcome.error.kind)
            return {"ok": False, "error": outcome.error.message, "kind": outcome.error.kind, "not_applied": True}

        refresh_error = None
        if outcome.data is not None:
            self._replace(outcome.data)
            self.notifications.push(level="success", title="Payment recorded", message="Charge marked as paid.")
        else:
            refresh_error = outcome.refresh_error.message
            self.stale = True
            self.notifications.push(
                level="warning",
                title="Payment recorded",
                message=STALE_AFTER_PAYMENT,
                details={"refresh_error": refresh_error},
            )
        self._emit("mutation", "billing.mark_paid", True)
        return {"ok": True, "charge_id": charge_id, "refresh_error": refresh_error, "stale": self.stale}

    def render(self, now: datetime | None = None) -> dict[str, Any]:
        moment = now or self.clock()
        # Cards and row labels are partitioned with the same instant.
        summary = summarize_charges(self.charges, moment)
        state = resolve_state(
            is_loading=self.is_loading,
            error=self.error_message,
            has_data=bool(self.charges),
            stale=self.stale,
        )
        return {
            "summary": {
                "pending_count": summary.pending_count,
                "pending_value": format_currency(summary.pending_value),
                "overdue_count": summary.overdue_count,
                "overdue_value": format_currency(summary.overdue_value),
                "total_receivable": format_currency(summary.total_receivable),
            },
            "search_term": self.search_term,
            "charges": [self._row(charge, moment) for charge in self.visible_charges()],
            "stale": self.stale,
            "view_state": state.render(),
            "notifications": self.notifications.render(),
        }

    def _row(self, charge: Charge, now: datetime) -> dict[str, Any]:
        overdue = charge.is_overdue(now)
        return {
            "id": charge.id,
            "client": charge.client,
            "sale_date": format_date(charge.sale_date),
            "due_date": format_date(charge.due_date),
            "value": format_currency(charge.value),
            "overdue": overdue,
            "status_label": OVERDUE_LABEL if overdue else PENDING_LABEL,
            "can_mark_paid": self.paying_charge_id is None,
        }

    def _replace(self, overview: BillingOverviewResponse) -> None:
        self.charges = list(overview.charges)
        self.summary = summarize_charges(self.charges, self.clock())
        self.stale = False
        self._log_drift(overview)

    def _log_drift(self, overview: BillingOverviewResponse) -> None:
        # Figures shown are always derived from the list; server totals are only compared.
        reported = (overview.pending.count, overview.overdue.count, overview.total_receivable)
        derived = (self.summary.pending_count, self.summary.overdue_count, self.summary.total_receivable)
        if overview.charges and reported != derived:
            logger.info(
                "summary_drift",
                extra={
                    "reported_pending": reported[0],
                    "reported_overdue": reported[1],
                    "derived_pending": derived[0],
                    "derived_overdue": derived[1],
                },
            )

    def _emit(self, category: str, action: str, success: bool, *, error_kind: str | None = None) -> None:
        self.telemetry.emit(
            build_event(
                category=category,
                name="mutation_result" if category == "mutation" else "billing_loaded",
                view="billing",
                action=action,
                success=success,
                error_kind=error_kind,
            )
        )
