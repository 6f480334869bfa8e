from __future__ import annotations

from datetime import date, datetime, time, timezone
from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, field_validator, model_validator

# Money stays a Decimal in memory and travels as a JSON number.
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


def parse_moment(value: Any) -> Any:
    """Normalize service timestamps to timezone-aware UTC datetimes.

    Date-only values mean midnight UTC and naive datetimes are taken as UTC.
    """
    if isinstance(value, str):
        raw = value.strip()
        if raw.endswith("Z"):
            raw = raw[:-1] + "+00:00"
        value = datetime.fromisoformat(raw)
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    return value


class Client(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: int
    name: str
    active: bool = Field(default=True, alias="status")


class StockItem(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    category: str = Field(alias="categoria")
    quantity: int = Field(alias="quantidade", ge=0)


class StockQuantityRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    category: str = Field(alias="categoria", min_length=1)
    quantity: int = Field(alias="quantidade", ge=0)


class UnitPriceRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    category: str = Field(alias="categoria", min_length=1)


class SaleCreateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    sale_date: datetime = Field(alias="data_venda")
    paid: bool = Field(alias="status_pagamento")
    client: str = Field(alias="cliente", min_length=1)
    category: str = Field(alias="categoria_produto", min_length=1)
    units: int = Field(alias="qtd_unidades", gt=0)
    due_date: datetime = Field(alias="data_vencimento")
    unit_price: Money = Field(alias="valor_unitario", gt=0)
    total_value: Money = Field(alias="valor_total")

    @model_validator(mode="after")
    def _total_matches_factors(self) -> "SaleCreateRequest":
        if self.total_value != self.units * self.unit_price:
            raise ValueError("valor_total must equal qtd_unidades * valor_unitario")
        return self

    @classmethod
    def build(
        cls,
        *,
        client: str,
        category: str,
        units: int,
        unit_price: Decimal,
        paid: bool,
        sale_date: datetime,
        due_date: datetime,
    ) -> "SaleCreateRequest":
        return cls(
            client=client,
            category=category,
            units=units,
            unit_price=unit_price,
            total_value=units * unit_price,
            paid=paid,
            sale_date=sale_date,
            due_date=due_date,
        )


class StatusSummary(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    count: int = Field(default=0, alias="quantidade")
    total_value: Money = Field(default=Decimal("0"), alias="valor_total")


class Charge(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: int
    created_at: datetime | None = None
    paid: bool = Field(default=False, alias="status_pagamento")
    client: str = Field(alias="cliente")
    due_date: datetime = Field(alias="vencimento")
    sale_date: datetime = Field(alias="data_venda")
    value: Money = Field(alias="valor")

    @field_validator("created_at", "due_date", "sale_date", mode="before")
    @classmethod
    def _normalize_moments(cls, value: Any) -> Any:
        return parse_moment(value)

    def is_overdue(self, now: datetime) -> bool:
        return self.due_date < now


class BillingOverviewResponse(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    pending: StatusSummary = Field(default_factory=StatusSummary, alias="pendentes")
    overdue: StatusSummary = Field(default_factory=StatusSummary, alias="vencidas")
    total_receivable: Money = Field(default=Decimal("0"), alias="total_a_receber")
    charges: list[Charge] = Field(default_factory=list, alias="cobrancas_nao_pagas")


class PayChargeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    client: str = Field(alias="cliente", min_length=1)
    due_date: date = Field(alias="vencimento")
    value: Money = Field(alias="valor")

    @classmethod
    def for_charge(cls, charge: Charge) -> "PayChargeRequest":
        return cls(client=charge.client, due_date=charge.due_date.date(), value=charge.value)


class PaidChargeRecord(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    client: str = Field(alias="cliente")
    due_date: date = Field(alias="vencimento")
    value: Money = Field(alias="valor")
    status: str = ""

    @field_validator("due_date", mode="before")
    @classmethod
    def _calendar_date(cls, value: Any) -> Any:
        moment = parse_moment(value)
        return moment.date() if isinstance(moment, datetime) else moment
