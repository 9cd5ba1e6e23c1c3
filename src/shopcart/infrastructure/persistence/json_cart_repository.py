"""JSON-document-backed implementation of CartRepository."""

from __future__ import annotations

from datetime import datetime

from shopcart.domain.model.cart import CartStatus, ShoppingCart
from shopcart.domain.repository.cart_repository import CartRepository
from shopcart.infrastructure.persistence.json_session import JsonSession


class JsonCartRepository(CartRepository):

    def __init__(self, session: JsonSession) -> None:
        self._session = session

    # --- CartRepository interface ---------------------------------------------

    def get_by_id(self, cart_id: int) -> ShoppingCart | None:
        return self._session.cart(cart_id)

    def save(self, cart: ShoppingCart) -> None:
        if cart.id is None:
            cart.id = self._session.next_id("carts")
        self._session.upsert_row("carts", self._to_raw(cart))
        self._session.remember_cart(cart)

    def find_abandoned(self, created_before: datetime) -> list[ShoppingCart]:
        return [
            self._session.cart(raw["id"])  # type: ignore[misc]
            for raw in self._session.table("carts")
            if raw["status"] == CartStatus.ACTIVE.value
            and raw.get("checked_out_at") is None
            and datetime.fromisoformat(raw["created_at"]) < created_before
        ]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(cart: ShoppingCart) -> dict:
        return {
            "id": cart.id,
            "status": cart.status.value,
            "created_at": cart.created_at.isoformat(),
            "last_modified_at": cart.last_modified_at.isoformat(),
            "checked_out_at": (
                cart.checked_out_at.isoformat() if cart.checked_out_at else None
            ),
        }
