"""Abstract repository for ShoppingCart aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from shopcart.domain.model.cart import ShoppingCart


class CartRepository(ABC):

    @abstractmethod
    def get_by_id(self, cart_id: int) -> ShoppingCart | None:
        """Return a cart with its items, or None if not found."""

    @abstractmethod
    def save(self, cart: ShoppingCart) -> None:
        """Persist a new or updated cart, assigning an ID if it has none.

        Only the cart's own fields are written; line items are persisted
        through the CartItemRepository.
        """

    @abstractmethod
    def find_abandoned(self, created_before: datetime) -> list[ShoppingCart]:
        """Return ACTIVE carts never checked out and created strictly before *created_before*."""
