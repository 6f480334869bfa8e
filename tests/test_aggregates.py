from __future__ import annotations

from datetime import timedelta
from decimal import Decimal

from brownie_app.services.aggregates import filter_charges_by_client, is_overdue, stock_totals, summarize_charges
from brownie_sdk import StockItem

from conftest import NOW, make_charge


def test_summary_partitions_every_charge() -> None:
    charges = [
        make_charge(1, "Ana", -3, "55.00"),
        make_charge(2, "Bruno", 4, "30.00"),
        make_charge(3, "Carla", 10, "12.50"),
    ]
    summary = summarize_charges(charges, NOW)
    assert summary.overdue_count == 1
    assert summary.overdue_value == Decimal("55.00")
    assert summary.pending_count == 2
    assert summary.pending_value == Decimal("42.50")
    assert summary.total_count == len(charges)
    assert summary.total_receivable == Decimal("97.50")


def test_summary_of_nothing_is_zero() -> None:
    summary = summarize_charges([], NOW)
    assert summary.total_count == 0
    assert summary.total_receivable == Decimal("0")


def test_summary_is_repeatable() -> None:
    charges = [make_charge(1, "Ana", -1, "10.00"), make_charge(2, "Bruno", 1, "20.00")]
    assert summarize_charges(charges, NOW) == summarize_charges(charges, NOW)


def test_overdue_is_strictly_before_now_and_monotonic() -> None:
    charge = make_charge(1, "Ana", 0, "10.00")
    assert not is_overdue(charge, NOW)
    assert is_overdue(charge, NOW + timedelta(seconds=1))
    assert is_overdue(charge, NOW + timedelta(days=30))
    assert not is_overdue(charge, NOW - timedelta(days=1))


def test_stock_totals() -> None:
    totals = stock_totals([StockItem(category="Nuts", quantity=12), StockItem(category="Traditional", quantity=30)])
    assert totals.by_category == {"Nuts": 12, "Traditional": 30}
    assert totals.total_units == 42


def test_filter_charges_by_client_is_case_insensitive() -> None:
    charges = [make_charge(1, "Ana", 1, "1"), make_charge(2, "Ana Paula", 1, "1"), make_charge(3, "Bruno", 1, "1")]
    assert [c.id for c in filter_charges_by_client(charges, "ana")] == [1, 2]
    assert [c.id for c in filter_charges_by_client(charges, "  ")] == [1, 2, 3]
