"""ShoppingCart aggregate — the core of the domain.

The ShoppingCart is an aggregate root that owns its line items.
Lifecycle invariants are enforced here; the cart domain service
coordinates the repositories around them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from shopcart.domain.exceptions import InvalidStateError, ValidationError
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money, Quantity


class CartStatus(Enum):
    ACTIVE = "ACTIVE"
    CHECKED_OUT = "CHECKED_OUT"


@dataclass
class CartItem:
    """One product's quantity within a cart.

    The item references the live Product, so its line total always uses
    the product's current catalog price.
    """

    id: int | None
    cart_id: int | None
    product: Product
    quantity: Quantity

    @property
    def product_id(self) -> int | None:
        return self.product.id

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity.value

    def increase(self, qty: int) -> None:
        """Accumulate *qty* more units onto this line."""
        self.quantity = self.quantity + Quantity(qty)

    def decrease(self, qty: int) -> None:
        """Take *qty* units off this line, leaving at least one."""
        if qty <= 0:
            raise ValidationError("Quantity to remove must be positive")
        if qty >= self.quantity.value:
            raise ValidationError(
                f"Cannot decrease {self.product.name} by {qty} "
                f"— only {self.quantity.value} in cart"
            )
        self.quantity = Quantity(self.quantity.value - qty)


@dataclass
class ShoppingCart:
    """Aggregate root for shopping carts.

    Use ``ShoppingCart.open()`` for new carts.  The ``__init__`` is kept
    plain so the repository can reconstitute persisted carts as they are.

    Invariants:
    - ``checked_out_at`` is set if and only if status is CHECKED_OUT
    - a CHECKED_OUT cart never changes its items again
    - at most one item per product
    """

    id: int | None
    created_at: datetime
    last_modified_at: datetime
    status: CartStatus = CartStatus.ACTIVE
    items: list[CartItem] = field(default_factory=list)
    checked_out_at: datetime | None = None

    # --- Factory (used for NEW carts only) ------------------------------------

    @staticmethod
    def open(now: datetime) -> ShoppingCart:
        return ShoppingCart(id=None, created_at=now, last_modified_at=now)

    # --- Item management ------------------------------------------------------

    def ensure_active(self, action: str) -> None:
        """Raise InvalidStateError unless the cart still accepts *action*."""
        if self.is_checked_out:
            raise InvalidStateError(f"Cannot {action} a checked out cart")

    def attach(self, item: CartItem) -> None:
        """Add a brand-new line item to the cart."""
        self.ensure_active("add items to")
        if self.item_for(item.product_id) is not None:
            raise InvalidStateError(
                f"Product '{item.product.name}' is already in cart #{self.id}"
            )
        self.items.append(item)

    def detach(self, item: CartItem) -> None:
        """Drop a line item from the cart entirely."""
        self.ensure_active("remove items from")
        self.items.remove(item)

    def item_for(self, product_id: int | None) -> CartItem | None:
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None

    def quantity_of(self, product_id: int | None) -> int:
        """Units of a product in this cart, 0 if it is not present."""
        item = self.item_for(product_id)
        return item.quantity.value if item is not None else 0

    def touch(self, now: datetime) -> None:
        self.last_modified_at = now

    # --- State transitions ----------------------------------------------------

    def check_out(self, now: datetime) -> None:
        """Transition ACTIVE -> CHECKED_OUT.

        Not idempotent: checking out twice is an error.  An empty cart may
        be checked out.
        """
        if self.is_checked_out:
            raise InvalidStateError(f"Shopping cart #{self.id} is already checked out")
        self.status = CartStatus.CHECKED_OUT
        self.checked_out_at = now
        self.last_modified_at = now

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result

    @property
    def is_checked_out(self) -> bool:
        return self.status == CartStatus.CHECKED_OUT
