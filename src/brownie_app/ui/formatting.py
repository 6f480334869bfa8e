from __future__ import annotations

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal


def format_currency(value: Decimal | int | float | None) -> str:
    """Render an amount the way the shop reads it, e.g. ``R$ 1.234,56``."""
    amount = Decimal(str(value or 0)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 else ""
    whole, cents = f"{abs(amount):.2f}".split(".")
    grouped = f"{int(whole):,}".replace(",", ".")
    return f"{sign}R$ {grouped},{cents}"


def format_date(value: date | datetime | None) -> str:
    if value is None:
        return ""
    if isinstance(value, datetime):
        value = value.date()
    return value.strftime("%d/%m/%Y")
