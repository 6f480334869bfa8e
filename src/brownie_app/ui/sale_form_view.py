from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Callable

from brownie_sdk import Client, ClientValidationError, ValidationIssue
from brownie_sdk.validation import parse_price, parse_units

from ..config import AppConfig
from ..services.catalog_service import CatalogService
from ..services.errors import OperationError
from ..services.price_resolver import PriceResolution, PriceResolver
from ..services.refresh import gather_reads, run_mutation
from ..services.sales_service import SalesService
from ..telemetry import TelemetryLogger, build_event
from .formatting import format_currency
from .notification_center import NotificationCenter
from .view_state import resolve_state

logger = logging.getLogger(__name__)

Dispatch = Callable[[Callable[[], None]], None]

SUCCESS_NOTICE = "Sale registered successfully!"
VALIDATION_NOTICE = "Please fill in every required field, including a valid unit price."


def run_inline(job: Callable[[], None]) -> None:
    job()


class FormPhase(str, Enum):
    EDITING = "editing"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class FormStatus:
    """Single value describing where the form is; replaces loose busy/error/success flags."""

    phase: FormPhase = FormPhase.EDITING
    notice: str | None = None
    issues: tuple[ValidationIssue, ...] = ()

    @classmethod
    def editing(cls) -> "FormStatus":
        return cls(FormPhase.EDITING)

    @classmethod
    def submitting(cls) -> "FormStatus":
        return cls(FormPhase.SUBMITTING)

    @classmethod
    def succeeded(cls, notice: str) -> "FormStatus":
        return cls(FormPhase.SUCCEEDED, notice)

    @classmethod
    def failed(cls, notice: str, issues: tuple[ValidationIssue, ...] = ()) -> "FormStatus":
        return cls(FormPhase.FAILED, notice, issues)

    def render(self) -> dict[str, Any]:
        return {
            "phase": self.phase.value,
            "notice": self.notice,
            "issues": [{"field": issue.field, "reason": issue.reason} for issue in self.issues],
        }


class PaymentStatus(str, Enum):
    RECEIVABLE = "A receber"
    PAID = "Pago"


@dataclass
class SaleFormFields:
    client: str = ""
    category: str = ""
    units: int = 0
    unit_price: Decimal | None = None
    deadline_days: int = 7
    payment_status: PaymentStatus = PaymentStatus.RECEIVABLE

    @property
    def total_value(self) -> Decimal:
        return self.units * (self.unit_price or Decimal("0"))


@dataclass
class SaleFormView:
    catalog: CatalogService
    sales: SalesService
    config: AppConfig = field(default_factory=AppConfig)
    dispatch: Dispatch = run_inline
    telemetry: TelemetryLogger = field(default_factory=TelemetryLogger)
    notifications: NotificationCenter = field(default_factory=NotificationCenter)
    clients: list[Client] = field(default_factory=list)
    categories: list[str] = field(default_factory=list)
    fields: SaleFormFields | None = None
    status: FormStatus = field(default_factory=FormStatus)
    price_error: str | None = None
    load_error: str | None = None
    is_loading: bool = False
    resolver: PriceResolver | None = None

    def __post_init__(self) -> None:
        if self.fields is None:
            self.fields = self._initial_fields()
        if self.resolver is None:
            self.resolver = PriceResolver(self.catalog)

    @property
    def is_submitting(self) -> bool:
        return self.status.phase is FormPhase.SUBMITTING

    @property
    def total_value(self) -> Decimal:
        return self.fields.total_value

    def load(self) -> bool:
        self.is_loading = True
        try:
            reference = self._read_reference_data()
        except OperationError as exc:
            self.load_error = exc.message
            return False
        finally:
            self.is_loading = False
        self._apply_reference_data(reference)
        self.load_error = None
        return True

    def select_client(self, name: str | None) -> dict[str, Any]:
        self._touch()
        self.fields.client = name or ""
        return {"ok": True, "client": self.fields.client}

    def select_category(self, category: str | None) -> dict[str, Any]:
        self._touch()
        self.fields.category = category or ""
        ticket = self.resolver.begin(self.fields.category)
        # The previous category's price is never carried over to the new one.
        self.fields.unit_price = None
        self.price_error = None
        if ticket is None:
            return {"ok": True, "category": "", "unit_price": None}
        self.dispatch(lambda: self.apply_price(self.resolver.fetch(ticket)))
        return {
            "ok": self.price_error is None,
            "category": self.fields.category,
            "unit_price": self.fields.unit_price,
            "price_error": self.price_error,
        }

    def apply_price(self, resolution: PriceResolution) -> bool:
        if not self.resolver.is_current(resolution.ticket):
            logger.info(
                "stale_price_discarded",
                extra={"category": resolution.ticket.category, "token": resolution.ticket.token},
            )
            return False
        if resolution.ok:
            self.fields.unit_price = resolution.price
            self.price_error = None
        else:
            self.fields.unit_price = None
            self.price_error = resolution.error
        return True

    def set_units(self, value: Any) -> dict[str, Any]:
        self._touch()
        self.fields.units = parse_units(value)
        return {"ok": True, "units": self.fields.units, "total_value": self.total_value}

    def set_unit_price(self, value: Any) -> dict[str, Any]:
        # A typed price wins over any lookup still in flight.
        self._touch()
        self.resolver.cancel()
        self.fields.unit_price = parse_price(value)
        self.price_error = None
        return {"ok": True, "unit_price": self.fields.unit_price, "total_value": self.total_value}

    def set_deadline(self, days: Any) -> dict[str, Any]:
        self._touch()
        parsed = parse_units(days)
        if parsed not in self.config.deadline_options:
            return {"ok": False, "error": f"Deadline must be one of {list(self.config.deadline_options)} days"}
        self.fields.deadline_days = parsed
        return {"ok": True, "deadline_days": parsed}

    def set_payment_status(self, status: PaymentStatus | str) -> dict[str, Any]:
        self._touch()
        try:
            self.fields.payment_status = PaymentStatus(status)
        except ValueError:
            return {"ok": False, "error": f"Unknown payment status: {status}"}
        return {"ok": True, "payment_status": self.fields.payment_status.value}

    def submit(self) -> dict[str, Any]:
        if self.is_submitting:
            return {"ok": False, "error": "Sale submission already in progress"}
        try:
            request = self.sales.build_sale(
                client=self.fields.client,
                category=self.fields.category,
                units=self.fields.units,
                unit_price=self.fields.unit_price,
                deadline_days=self.fields.deadline_days,
                paid=self.fields.payment_status is PaymentStatus.PAID,
            )
        except ClientValidationError as exc:
            self.status = FormStatus.failed(VALIDATION_NOTICE, tuple(exc.issues))
            return {
                "ok": False,
                "error": VALIDATION_NOTICE,
                "issues": self.status.render()["issues"],
                "not_sent": True,
            }

        self.status = FormStatus.submitting()
        outcome = run_mutation(
            lambda: self.sales.register_sale(request),
            self._read_reference_data,
            action="sale.register",
        )
        if not outcome.committed:
            self.status = FormStatus.failed(outcome.error.message)
            self._emit("sale.register", success=False, error_kind=outcome.error.kind)
            return {"ok": False, "error": outcome.error.message, "kind": outcome.error.kind, "values": self.render()["fields"]}

        self.fields = self._initial_fields()
        self.resolver.cancel()
        self.price_error = None
        self.status = FormStatus.succeeded(SUCCESS_NOTICE)
        refresh_error = None
        if outcome.data is not None:
            self._apply_reference_data(outcome.data)
        else:
            refresh_error = outcome.refresh_error.message
            self.notifications.push(
                level="warning",
                title="Sale saved",
                message=f"The sale was registered but the form data could not be reloaded: {refresh_error}",
            )
        self._emit("sale.register", success=True)
        return {
            "ok": True,
            "notice": SUCCESS_NOTICE,
            "sale": request.model_dump(mode="json", by_alias=True),
            "refresh_error": refresh_error,
        }

    def render(self) -> dict[str, Any]:
        state = resolve_state(
            is_loading=self.is_loading,
            error=self.load_error,
            has_data=bool(self.clients or self.categories),
        )
        return {
            "clients": [{"id": client.id, "name": client.name, "active": client.active} for client in self.clients],
            "categories": list(self.categories),
            "deadline_options": list(self.config.deadline_options),
            "payment_statuses": [status.value for status in PaymentStatus],
            "fields": {
                "client": self.fields.client,
                "category": self.fields.category,
                "units": self.fields.units,
                "unit_price": self.fields.unit_price,
                "deadline_days": self.fields.deadline_days,
                "payment_status": self.fields.payment_status.value,
            },
            "total_value": self.total_value,
            "total_value_display": format_currency(self.total_value),
            "price_error": self.price_error,
            "status": self.status.render(),
            "actions": {"can_submit": not self.is_submitting},
            "view_state": state.render(),
            "notifications": self.notifications.render(),
        }

    def _initial_fields(self) -> SaleFormFields:
        return SaleFormFields(deadline_days=self.config.default_deadline_days)

    def _touch(self) -> None:
        if self.status.phase in {FormPhase.SUCCEEDED, FormPhase.FAILED}:
            self.status = FormStatus.editing()

    def _read_reference_data(self) -> dict[str, Any]:
        return gather_reads({"clients": self.catalog.list_clients, "categories": self.catalog.list_categories})

    def _apply_reference_data(self, reference: dict[str, Any]) -> None:
        self.clients = list(reference["clients"])
        self.categories = list(reference["categories"])

    def _emit(self, action: str, *, success: bool, error_kind: str | None = None) -> None:
        self.telemetry.emit(
            build_event(
                category="mutation",
                name="mutation_result",
                view="sell",
                action=action,
                success=success,
                error_kind=error_kind,
            )
        )
