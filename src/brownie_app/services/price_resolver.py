from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol

from .errors import OperationError

logger = logging.getLogger(__name__)


class UnitPriceSource(Protocol):
    def unit_price(self, category: str) -> Decimal: ...


@dataclass(frozen=True)
class PriceTicket:
    token: int
    category: str


@dataclass(frozen=True)
class PriceResolution:
    ticket: PriceTicket
    price: Decimal | None = None
    error: str | None = None
    not_found: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None and self.price is not None


class PriceResolver:
    """Tracks which category's price lookup is still wanted.

    Every selection issues a ticket with a higher token. Only the ticket issued
    last is current, so a lookup that returns after the user picked another
    category is recognised as stale no matter when it arrives.
    """

    def __init__(self, source: UnitPriceSource) -> None:
        self.source = source
        self._token = 0
        self._active: PriceTicket | None = None

    @property
    def active(self) -> PriceTicket | None:
        return self._active

    def begin(self, category: str | None) -> PriceTicket | None:
        self._token += 1
        if not category:
            self._active = None
            return None
        self._active = PriceTicket(token=self._token, category=category)
        return self._active

    def cancel(self) -> None:
        self._token += 1
        self._active = None

    def is_current(self, ticket: PriceTicket) -> bool:
        return self._active is not None and self._active == ticket

    def fetch(self, ticket: PriceTicket) -> PriceResolution:
        try:
            price = self.source.unit_price(ticket.category)
        except OperationError as exc:
            logger.info("price_lookup_failed", extra={"category": ticket.category, "kind": exc.kind})
            return PriceResolution(ticket=ticket, error=exc.message, not_found=exc.kind == "not_found")
        return PriceResolution(ticket=ticket, price=price)
