"""Summary figures derived from freshly fetched collections.

Everything here is a pure function of its inputs: nothing is cached or
updated incrementally, so calling twice on the same input gives the same
answer.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Iterable, Sequence

from brownie_sdk.models import Charge, StockItem

ZERO = Decimal("0")


@dataclass(frozen=True)
class FinancialSummary:
    pending_count: int = 0
    pending_value: Decimal = ZERO
    overdue_count: int = 0
    overdue_value: Decimal = ZERO

    @property
    def total_receivable(self) -> Decimal:
        return self.pending_value + self.overdue_value

    @property
    def total_count(self) -> int:
        return self.pending_count + self.overdue_count


@dataclass(frozen=True)
class StockTotals:
    by_category: dict[str, int] = field(default_factory=dict)
    total_units: int = 0


def is_overdue(charge: Charge, now: datetime) -> bool:
    return charge.due_date < now


def summarize_charges(charges: Iterable[Charge], now: datetime) -> FinancialSummary:
    pending_count = overdue_count = 0
    pending_value = overdue_value = ZERO
    for charge in charges:
        if is_overdue(charge, now):
            overdue_count += 1
            overdue_value += charge.value
        else:
            pending_count += 1
            pending_value += charge.value
    return FinancialSummary(
        pending_count=pending_count,
        pending_value=pending_value,
        overdue_count=overdue_count,
        overdue_value=overdue_value,
    )


def stock_totals(items: Iterable[StockItem]) -> StockTotals:
    by_category: dict[str, int] = {}
    for item in items:
        by_category[item.category] = by_category.get(item.category, 0) + item.quantity
    return StockTotals(by_category=by_category, total_units=sum(by_category.values()))


def filter_charges_by_client(charges: Sequence[Charge], term: str | None) -> list[Charge]:
    needle = (term or "").strip().lower()
    if not needle:
        return list(charges)
    return [charge for charge in charges if needle in charge.client.lower()]
