from __future__ import annotations

from decimal import Decimal

from brownie_app.services.catalog_service import CatalogService
from brownie_app.services.price_resolver import PriceResolver


def test_only_latest_ticket_is_current(session) -> None:
    resolver = PriceResolver(CatalogService(session))
    first = resolver.begin("Traditional")
    second = resolver.begin("Nuts")
    assert not resolver.is_current(first)
    assert resolver.is_current(second)


def test_reselecting_same_category_issues_new_ticket(session) -> None:
    resolver = PriceResolver(CatalogService(session))
    first = resolver.begin("Traditional")
    second = resolver.begin("Traditional")
    assert first != second
    assert not resolver.is_current(first)


def test_empty_category_clears_active_ticket(session) -> None:
    resolver = PriceResolver(CatalogService(session))
    ticket = resolver.begin("Traditional")
    assert resolver.begin("") is None
    assert resolver.active is None
    assert not resolver.is_current(ticket)


def test_fetch_success_and_not_found(session) -> None:
    resolver = PriceResolver(CatalogService(session))
    found = resolver.fetch(resolver.begin("Traditional"))
    assert found.ok
    assert found.price == Decimal("5.50")

    missing = resolver.fetch(resolver.begin("Dulce de leche"))
    assert not missing.ok
    assert missing.not_found
    assert missing.price is None
    assert missing.error == "Categoria não encontrada"


def test_cancel_invalidates_in_flight_ticket(session) -> None:
    resolver = PriceResolver(CatalogService(session))
    ticket = resolver.begin("Nuts")
    resolver.cancel()
    assert not resolver.is_current(ticket)
