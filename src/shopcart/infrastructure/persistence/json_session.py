"""In-memory working copy of the JSON document for one unit of work.

The session owns the raw tables and an identity map per entity type,
so every repository of a unit of work hands out the same Python object
for the same stored row.  A line item found through the item repository
is therefore the very object held in its cart's ``items`` list.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from shopcart.domain.exceptions import StorageError
from shopcart.domain.model.cart import CartItem, CartStatus, ShoppingCart
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money, Quantity

TABLES = ("products", "carts", "cart_items")


def empty_document() -> dict:
    document: dict = {"sequences": {name: 0 for name in TABLES}}
    for name in TABLES:
        document[name] = []
    return document


class JsonSession:

    def __init__(self, document: dict) -> None:
        self.document = document
        self._products: dict[int, Product] = {}
        self._carts: dict[int, ShoppingCart] = {}
        self._items: dict[int, CartItem] = {}

    # --- Raw table access -----------------------------------------------------

    def table(self, name: str) -> list[dict]:
        return self.document.setdefault(name, [])

    def next_id(self, name: str) -> int:
        sequences = self.document.setdefault("sequences", {})
        sequences[name] = sequences.get(name, 0) + 1
        return sequences[name]

    def find_row(self, name: str, row_id: int) -> dict | None:
        for raw in self.table(name):
            if raw["id"] == row_id:
                return raw
        return None

    def upsert_row(self, name: str, row: dict) -> None:
        rows = self.table(name)
        for i, raw in enumerate(rows):
            if raw["id"] == row["id"]:
                rows[i] = row
                return
        rows.append(row)

    def delete_row(self, name: str, row_id: int) -> None:
        rows = self.table(name)
        rows[:] = [raw for raw in rows if raw["id"] != row_id]

    # --- Identity map ---------------------------------------------------------

    def product(self, product_id: int) -> Product | None:
        if product_id in self._products:
            return self._products[product_id]
        raw = self.find_row("products", product_id)
        if raw is None:
            return None
        product = Product(
            id=raw["id"],
            name=raw["name"],
            price=Money(Decimal(raw["price"])),
            type=raw["type"],
        )
        self._products[product_id] = product
        return product

    def cart(self, cart_id: int) -> ShoppingCart | None:
        if cart_id in self._carts:
            return self._carts[cart_id]
        raw = self.find_row("carts", cart_id)
        if raw is None:
            return None
        items = [
            self.item(row)
            for row in sorted(self.table("cart_items"), key=lambda r: r["id"])
            if row["cart_id"] == cart_id
        ]
        checked_out_at = raw.get("checked_out_at")
        cart = ShoppingCart(
            id=raw["id"],
            status=CartStatus(raw["status"]),
            items=items,
            created_at=datetime.fromisoformat(raw["created_at"]),
            last_modified_at=datetime.fromisoformat(raw["last_modified_at"]),
            checked_out_at=(
                datetime.fromisoformat(checked_out_at) if checked_out_at else None
            ),
        )
        self._carts[cart_id] = cart
        return cart

    def item(self, raw: dict) -> CartItem:
        if raw["id"] in self._items:
            return self._items[raw["id"]]
        product = self.product(raw["product_id"])
        if product is None:
            raise StorageError(
                f"Cart item #{raw['id']} references missing product #{raw['product_id']}"
            )
        item = CartItem(
            id=raw["id"],
            cart_id=raw["cart_id"],
            product=product,
            quantity=Quantity(raw["quantity"]),
        )
        self._items[raw["id"]] = item
        return item

    def remember_product(self, product: Product) -> None:
        self._products[product.id] = product  # type: ignore[index]

    def remember_cart(self, cart: ShoppingCart) -> None:
        self._carts[cart.id] = cart  # type: ignore[index]

    def remember_item(self, item: CartItem) -> None:
        self._items[item.id] = item  # type: ignore[index]

    def forget_product(self, product_id: int) -> None:
        self._products.pop(product_id, None)

    def forget_item(self, item_id: int) -> None:
        self._items.pop(item_id, None)
