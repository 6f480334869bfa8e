from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Callable

from brownie_sdk import ApiSession, SaleCreateRequest
from brownie_sdk.validation import validate_sale_draft

from .errors import normalize_error

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SalesService:
    def __init__(self, session: ApiSession, clock: Clock = utc_now) -> None:
        self.session = session
        self.clock = clock

    def build_sale(
        self,
        *,
        client: str | None,
        category: str | None,
        units: int,
        unit_price: Decimal | None,
        deadline_days: int,
        paid: bool,
    ) -> SaleCreateRequest:
        validate_sale_draft(client=client, category=category, units=units, unit_price=unit_price)
        now = self.clock()
        return SaleCreateRequest.build(
            client=str(client),
            category=str(category),
            units=units,
            unit_price=unit_price,  # type: ignore[arg-type]
            paid=paid,
            sale_date=now,
            due_date=now + timedelta(days=deadline_days),
        )

    def register_sale(self, request: SaleCreateRequest) -> None:
        try:
            self.session.sales_client().register_sale(request)
        except Exception as exc:
            raise normalize_error(exc, "Could not register the sale.") from exc
        logger.info("sale_registered", extra={"category": request.category, "units": request.units})
