from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from brownie_sdk import (
    BillingOverviewResponse,
    Charge,
    Client,
    NotFoundError,
    PaidChargeRecord,
    PayChargeRequest,
    SaleCreateRequest,
    StatusSummary,
    StockItem,
)

NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def _set_api_base_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BROWNIE_API_BASE_URL", "https://api.example.com")


@dataclass
class FakeShop:
    """In-memory stand-in for the shop service; every call is recorded in ``calls``."""

    clients: list[Client] = field(default_factory=list)
    categories: list[str] = field(default_factory=list)
    prices: dict[str, Decimal] = field(default_factory=dict)
    stock: dict[str, int] = field(default_factory=dict)
    charges: list[Charge] = field(default_factory=list)
    paid: list[PaidChargeRecord] = field(default_factory=list)
    sales: list[SaleCreateRequest] = field(default_factory=list)
    calls: list[str] = field(default_factory=list)
    failures: dict[str, Exception] = field(default_factory=dict)

    def hit(self, operation: str) -> None:
        self.calls.append(operation)
        exc = self.failures.get(operation)
        if exc is not None:
            raise exc

    def overview(self) -> BillingOverviewResponse:
        overdue = [charge for charge in self.charges if charge.due_date < NOW]
        pending = [charge for charge in self.charges if charge.due_date >= NOW]
        return BillingOverviewResponse(
            pending=StatusSummary(count=len(pending), total_value=sum((c.value for c in pending), Decimal("0"))),
            overdue=StatusSummary(count=len(overdue), total_value=sum((c.value for c in overdue), Decimal("0"))),
            total_receivable=sum((c.value for c in self.charges), Decimal("0")),
            charges=list(self.charges),
        )


@dataclass
class FakeClientsClient:
    shop: FakeShop

    def list_clients(self) -> list[Client]:
        self.shop.hit("clients.list")
        return list(self.shop.clients)


@dataclass
class FakeStockClient:
    shop: FakeShop

    def list_categories(self) -> list[str]:
        self.shop.hit("stock.categories")
        return list(self.shop.categories)

    def get_stock(self) -> list[StockItem]:
        self.shop.hit("stock.list")
        return [StockItem(category=name, quantity=qty) for name, qty in self.shop.stock.items()]

    def unit_price(self, category: str) -> Decimal:
        self.shop.hit("stock.unit_price")
        if category not in self.shop.prices:
            raise NotFoundError(message="Categoria não encontrada", status_code=404)
        return self.shop.prices[category]

    def add_to_stock(self, category: str, quantity: int) -> None:
        self.shop.hit("stock.add")
        self.shop.stock[category] = self.shop.stock.get(category, 0) + quantity

    def set_stock(self, category: str, quantity: int) -> None:
        self.shop.hit("stock.set")
        self.shop.stock[category] = quantity


@dataclass
class FakeSalesClient:
    shop: FakeShop

    def register_sale(self, payload: SaleCreateRequest) -> None:
        self.shop.hit("sales.register")
        self.shop.sales.append(payload)


@dataclass
class FakeBillingClient:
    shop: FakeShop

    def pending_overview(self) -> BillingOverviewResponse:
        self.shop.hit("billing.pending")
        return self.shop.overview()

    def pay_charge(self, request: PayChargeRequest) -> None:
        self.shop.hit("billing.pay")
        for charge in list(self.shop.charges):
            if (
                charge.client == request.client
                and charge.due_date.date() == request.due_date
                and charge.value == request.value
            ):
                self.shop.charges.remove(charge)
                self.shop.paid.append(
                    PaidChargeRecord(client=charge.client, due_date=request.due_date, value=charge.value, status="Pago")
                )
                return

    def paid_history(self) -> list[PaidChargeRecord]:
        self.shop.hit("billing.paid_history")
        return list(self.shop.paid)


@dataclass
class FakeSession:
    shop: FakeShop

    def clients_client(self) -> FakeClientsClient:
        return FakeClientsClient(self.shop)

    def stock_client(self) -> FakeStockClient:
        return FakeStockClient(self.shop)

    def sales_client(self) -> FakeSalesClient:
        return FakeSalesClient(self.shop)

    def billing_client(self) -> FakeBillingClient:
        return FakeBillingClient(self.shop)


def make_charge(charge_id: int, client: str, due_in_days: int, value: str) -> Charge:
    due = NOW + timedelta(days=due_in_days)
    return Charge(
        id=charge_id,
        client=client,
        due_date=due,
        sale_date=due - timedelta(days=7),
        value=Decimal(value),
    )


@pytest.fixture
def shop() -> FakeShop:
    return FakeShop(
        clients=[Client(id=1, name="Ana"), Client(id=2, name="Bruno"), Client(id=3, name="Carla", active=False)],
        categories=["Traditional", "Nuts", "Dulce de leche"],
        prices={"Traditional": Decimal("5.50"), "Nuts": Decimal("6.00")},
        stock={"Traditional": 30, "Nuts": 12},
        charges=[
            make_charge(101, "Ana", -3, "55.00"),
            make_charge(102, "Bruno", 4, "30.00"),
            make_charge(103, "Ana Paula", 10, "12.50"),
        ],
    )


@pytest.fixture
def session(shop: FakeShop) -> FakeSession:
    return FakeSession(shop)
