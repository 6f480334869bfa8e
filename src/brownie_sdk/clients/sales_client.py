from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..models import SaleCreateRequest
from .base import BaseClient


@dataclass
class SalesClient(BaseClient):
    def register_sale(self, payload: SaleCreateRequest | Mapping[str, Any]) -> None:
        request = payload if isinstance(payload, SaleCreateRequest) else SaleCreateRequest.model_validate(payload)
        self._write(
            "vendas/vender",
            request.model_dump(mode="json", by_alias=True),
            operation="sales.register",
            fallback_message="Could not register the sale.",
        )
