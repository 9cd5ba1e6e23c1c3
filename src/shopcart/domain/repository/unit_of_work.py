"""Abstract unit of work — the transaction boundary of every use case.

A unit of work is used as a context manager.  Changes made through its
repositories become durable only when ``commit()`` is called; leaving
the block without committing (or by raising) rolls them back.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopcart.domain.repository.cart_item_repository import CartItemRepository
from shopcart.domain.repository.cart_repository import CartRepository
from shopcart.domain.repository.product_repository import ProductRepository


class UnitOfWork(ABC):

    products: ProductRepository
    carts: CartRepository
    cart_items: CartItemRepository

    def __enter__(self) -> UnitOfWork:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.rollback()

    @abstractmethod
    def commit(self) -> None:
        """Make every change of this unit of work durable, atomically."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard uncommitted changes. A no-op after commit."""
