from __future__ import annotations

from brownie_sdk import ApiSession, StockItem
from brownie_sdk.validation import validate_stock_quantity

from .errors import normalize_error

ADD_MINIMUM = 1
SET_MINIMUM = 0


class StockService:
    def __init__(self, session: ApiSession) -> None:
        self.session = session

    def list_stock(self) -> list[StockItem]:
        try:
            return self.session.stock_client().get_stock()
        except Exception as exc:
            raise normalize_error(exc, "Failed to load stock.") from exc

    def list_categories(self) -> list[str]:
        try:
            return self.session.stock_client().list_categories()
        except Exception as exc:
            raise normalize_error(exc, "Failed to load product categories.") from exc

    def add_to_stock(self, category: str | None, quantity: object) -> int:
        """Ask the service to add ``quantity`` units; the new level is computed remotely."""
        try:
            parsed = validate_stock_quantity(category, quantity, minimum=ADD_MINIMUM)
            self.session.stock_client().add_to_stock(str(category), parsed)
            return parsed
        except Exception as exc:
            raise normalize_error(exc, "Failed to add items to stock.") from exc

    def set_stock(self, category: str | None, quantity: object) -> int:
        try:
            parsed = validate_stock_quantity(category, quantity, minimum=SET_MINIMUM)
            self.session.stock_client().set_stock(str(category), parsed)
            return parsed
        except Exception as exc:
            raise normalize_error(exc, "Failed to update stock.") from exc
