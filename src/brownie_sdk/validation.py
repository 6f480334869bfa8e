from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from .exceptions import ClientValidationError, ValidationIssue


def parse_units(value: Any) -> int:
    """Whole units typed by the user; blank or unparsable input counts as zero."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return 0


def parse_price(value: Any) -> Decimal | None:
    if value is None:
        return None
    if isinstance(value, Decimal):
        return value
    raw = str(value).strip().replace(",", ".")
    if not raw:
        return None
    try:
        price = Decimal(raw)
    except InvalidOperation:
        return None
    return price if price.is_finite() else None


def collect_sale_issues(
    *,
    client: str | None,
    category: str | None,
    units: int,
    unit_price: Decimal | None,
) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    if not client:
        issues.append(ValidationIssue(field="client", reason="select a client"))
    if not category:
        issues.append(ValidationIssue(field="category", reason="select a product category"))
    if units <= 0:
        issues.append(ValidationIssue(field="units", reason="units must be greater than 0"))
    if unit_price is None or unit_price <= 0:
        issues.append(ValidationIssue(field="unit_price", reason="unit price must be greater than 0"))
    return issues


def validate_sale_draft(
    *,
    client: str | None,
    category: str | None,
    units: int,
    unit_price: Decimal | None,
) -> None:
    issues = collect_sale_issues(client=client, category=category, units=units, unit_price=unit_price)
    if issues:
        raise ClientValidationError(issues)


def validate_stock_quantity(category: str | None, quantity: Any, *, minimum: int) -> int:
    issues: list[ValidationIssue] = []
    if not category:
        issues.append(ValidationIssue(field="category", reason="select a product category"))
    parsed: int | None
    try:
        parsed = int(str(quantity).strip())
    except (TypeError, ValueError):
        parsed = None
    if parsed is None:
        issues.append(ValidationIssue(field="quantity", reason="quantity must be a whole number"))
    elif parsed < minimum:
        issues.append(ValidationIssue(field="quantity", reason=f"quantity must be at least {minimum}"))
    if issues:
        raise ClientValidationError(issues)
    return int(parsed)  # type: ignore[arg-type]
