"""Abstract repository for cart line items.

Items are owned by their ShoppingCart but stored as a flat table keyed
by cart ID and product ID.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopcart.domain.model.cart import CartItem, ShoppingCart
from shopcart.domain.model.product import Product


class CartItemRepository(ABC):

    @abstractmethod
    def find(self, cart: ShoppingCart, product: Product) -> CartItem | None:
        """Return the cart's line item for *product*, or None."""

    @abstractmethod
    def save(self, item: CartItem) -> None:
        """Persist a new or updated line item, assigning an ID if it has none."""

    @abstractmethod
    def delete(self, item: CartItem) -> None:
        """Remove a line item from the store."""

    @abstractmethod
    def exists_for_product(self, product_id: int) -> bool:
        """True if any cart holds a line item for the product."""
