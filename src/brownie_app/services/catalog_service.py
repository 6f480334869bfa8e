from __future__ import annotations

from decimal import Decimal

from brownie_sdk import ApiSession, Client

from .errors import normalize_error


class CatalogService:
    """Reference data used to fill the sale form: clients, categories and prices."""

    def __init__(self, session: ApiSession) -> None:
        self.session = session

    def list_clients(self) -> list[Client]:
        try:
            return self.session.clients_client().list_clients()
        except Exception as exc:
            raise normalize_error(exc, "Failed to load clients.") from exc

    def list_categories(self) -> list[str]:
        try:
            return self.session.stock_client().list_categories()
        except Exception as exc:
            raise normalize_error(exc, "Failed to load product categories.") from exc

    def unit_price(self, category: str) -> Decimal:
        try:
            return self.session.stock_client().unit_price(category)
        except Exception as exc:
            raise normalize_error(exc, "No price registered for this category.") from exc
