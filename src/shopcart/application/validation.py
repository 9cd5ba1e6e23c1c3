"""Boundary validation shared by the application handlers.

Requests are checked here, before any domain service runs, so the
domain only ever sees well-formed names, prices and quantities.
"""

from __future__ import annotations

from decimal import Decimal

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.value_objects import Money

MIN_PRICE = Money(Decimal("0.01"))


def require_text(value: str | None, label: str) -> str:
    if value is None or not value.strip():
        raise ValidationError(f"{label} is required")
    return value.strip()


def require_price(raw: str) -> Money:
    price = Money.of(raw)
    if price < MIN_PRICE:
        raise ValidationError(f"Product price must be at least {MIN_PRICE}")
    return price


def require_quantity(quantity: int) -> int:
    if quantity < 1:
        raise ValidationError("Quantity must be at least 1")
    return quantity
