"""In-memory fake repositories and unit of work for testing.

These implement the same abstract interfaces as the JSON store
but keep everything in dicts. No file I/O, no side effects.
"""

from __future__ import annotations

from datetime import datetime

from shopcart.domain.model.cart import CartItem, CartStatus, ShoppingCart
from shopcart.domain.model.product import Product
from shopcart.domain.repository.cart_item_repository import CartItemRepository
from shopcart.domain.repository.cart_repository import CartRepository
from shopcart.domain.repository.product_repository import ProductRepository
from shopcart.domain.repository.unit_of_work import UnitOfWork


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[int, Product] = {}
        self._next_id = 1
        for p in products or []:
            self.save(p)

    def get_by_id(self, product_id: int) -> Product | None:
        return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        if product.id is None:
            product.id = self._next_id
        self._next_id = max(self._next_id, product.id + 1)
        self._store[product.id] = product

    def delete(self, product: Product) -> None:
        del self._store[product.id]


class FakeCartRepository(CartRepository):

    def __init__(self) -> None:
        self._store: dict[int, ShoppingCart] = {}
        self._next_id = 1

    def get_by_id(self, cart_id: int) -> ShoppingCart | None:
        return self._store.get(cart_id)

    def save(self, cart: ShoppingCart) -> None:
        if cart.id is None:
            cart.id = self._next_id
            self._next_id += 1
        self._store[cart.id] = cart

    def find_abandoned(self, created_before: datetime) -> list[ShoppingCart]:
        return [
            cart
            for cart in self._store.values()
            if cart.status == CartStatus.ACTIVE
            and cart.checked_out_at is None
            and cart.created_at < created_before
        ]


class FakeCartItemRepository(CartItemRepository):

    def __init__(self) -> None:
        self._store: dict[int, CartItem] = {}
        self._next_id = 1

    def find(self, cart: ShoppingCart, product: Product) -> CartItem | None:
        for item in self._store.values():
            if item.cart_id == cart.id and item.product_id == product.id:
                return item
        return None

    def save(self, item: CartItem) -> None:
        if item.id is None:
            item.id = self._next_id
            self._next_id += 1
        self._store[item.id] = item

    def delete(self, item: CartItem) -> None:
        del self._store[item.id]

    def exists_for_product(self, product_id: int) -> bool:
        return any(item.product_id == product_id for item in self._store.values())

    def all(self) -> list[CartItem]:
        return list(self._store.values())


class FakeUnitOfWork(UnitOfWork):

    def __init__(self, products: list[Product] | None = None) -> None:
        self.products = FakeProductRepository(products)
        self.carts = FakeCartRepository()
        self.cart_items = FakeCartItemRepository()
        self.committed = False
        self.commits = 0

    def commit(self) -> None:
        self.committed = True
        self.commits += 1

    def rollback(self) -> None:
        pass


class FixedClock:
    """A clock the test moves by hand."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now
