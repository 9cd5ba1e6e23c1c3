"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from shopcart.domain.model.cart import ShoppingCart


@dataclass(frozen=True)
class CartItemDTO:
    """Output: a single line item as displayed to the user."""

    id: int
    product_id: int
    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00" or "$0.015"
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    """Output: a complete cart as displayed to the user."""

    id: int
    status: str
    items: list[CartItemDTO]
    total: str
    created_at: str
    last_modified_at: str
    checked_out_at: str | None


def _fmt(moment: datetime | None) -> str | None:
    if moment is None:
        return None
    return moment.isoformat(sep=" ", timespec="seconds")


def to_cart_dto(cart: ShoppingCart) -> CartDTO:
    return CartDTO(
        id=cart.id,  # type: ignore[arg-type]
        status=cart.status.value,
        items=[
            CartItemDTO(
                id=item.id,  # type: ignore[arg-type]
                product_id=item.product_id,  # type: ignore[arg-type]
                product_name=item.product.name,
                quantity=item.quantity.value,
                unit_price=str(item.product.price),
                line_total=str(item.line_total),
            )
            for item in cart.items
        ],
        total=str(cart.total),
        created_at=_fmt(cart.created_at),  # type: ignore[arg-type]
        last_modified_at=_fmt(cart.last_modified_at),  # type: ignore[arg-type]
        checked_out_at=_fmt(cart.checked_out_at),
    )
