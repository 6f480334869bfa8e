from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from ..exceptions import ServiceError
from ..models import StockItem, StockQuantityRequest, UnitPriceRequest
from .base import BaseClient, expect_list


@dataclass
class StockClient(BaseClient):
    def list_categories(self) -> list[str]:
        data = self._read(
            "estoque/categorias_estoque",
            operation="stock.categories",
            fallback_message="Failed to load product categories.",
        )
        return [str(category) for category in expect_list(data, "stock categories")]

    def get_stock(self) -> list[StockItem]:
        data = self._read(
            "estoque/estoque",
            operation="stock.list",
            fallback_message="Failed to load stock.",
        )
        return [StockItem.model_validate(row) for row in expect_list(data, "stock")]

    def unit_price(self, category: str) -> Decimal:
        request = UnitPriceRequest(category=category)
        data = self._write(
            "estoque/preco_unitario",
            request.model_dump(mode="json", by_alias=True),
            operation="stock.unit_price",
            fallback_message="No price registered for this category.",
        )
        if isinstance(data, bool) or not isinstance(data, (int, float, str)):
            raise ServiceError(message="Expected unit price response to be a number", detail=data)
        try:
            price = Decimal(str(data))
        except InvalidOperation as exc:
            raise ServiceError(message="Expected unit price response to be a number", detail=data) from exc
        if not price.is_finite():
            raise ServiceError(message="Expected unit price response to be a finite number", detail=data)
        return price

    def add_to_stock(self, category: str, quantity: int) -> None:
        request = StockQuantityRequest(category=category, quantity=quantity)
        self._write(
            "estoque/adicionar_ao_estoque",
            request.model_dump(mode="json", by_alias=True),
            operation="stock.add",
            fallback_message="Failed to add items to stock.",
        )

    def set_stock(self, category: str, quantity: int) -> None:
        request = StockQuantityRequest(category=category, quantity=quantity)
        self._write(
            "estoque/atualizar_estoque",
            request.model_dump(mode="json", by_alias=True),
            operation="stock.set",
            fallback_message="Failed to update stock.",
        )
