"""JSON-document-backed implementation of CartItemRepository.

Items are stored flat in the ``cart_items`` table, one row per
(cart_id, product_id) pair.
"""

from __future__ import annotations

from shopcart.domain.model.cart import CartItem, ShoppingCart
from shopcart.domain.model.product import Product
from shopcart.domain.repository.cart_item_repository import CartItemRepository
from shopcart.infrastructure.persistence.json_session import JsonSession


class JsonCartItemRepository(CartItemRepository):

    def __init__(self, session: JsonSession) -> None:
        self._session = session

    # --- CartItemRepository interface -----------------------------------------

    def find(self, cart: ShoppingCart, product: Product) -> CartItem | None:
        for raw in self._session.table("cart_items"):
            if raw["cart_id"] == cart.id and raw["product_id"] == product.id:
                return self._session.item(raw)
        return None

    def save(self, item: CartItem) -> None:
        if item.id is None:
            item.id = self._session.next_id("cart_items")
        self._session.upsert_row("cart_items", self._to_raw(item))
        self._session.remember_item(item)

    def delete(self, item: CartItem) -> None:
        self._session.delete_row("cart_items", item.id)  # type: ignore[arg-type]
        self._session.forget_item(item.id)  # type: ignore[arg-type]

    def exists_for_product(self, product_id: int) -> bool:
        return any(
            raw["product_id"] == product_id for raw in self._session.table("cart_items")
        )

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(item: CartItem) -> dict:
        return {
            "id": item.id,
            "cart_id": item.cart_id,
            "product_id": item.product_id,
            "quantity": item.quantity.value,
        }
