"""JSON-document-backed implementation of ProductRepository."""

from __future__ import annotations

from shopcart.domain.model.product import Product
from shopcart.domain.repository.product_repository import ProductRepository
from shopcart.infrastructure.persistence.json_session import JsonSession


class JsonProductRepository(ProductRepository):

    def __init__(self, session: JsonSession) -> None:
        self._session = session

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        return self._session.product(product_id)

    def list_all(self) -> list[Product]:
        return [
            self._session.product(raw["id"])  # type: ignore[misc]
            for raw in self._session.table("products")
        ]

    def save(self, product: Product) -> None:
        if product.id is None:
            product.id = self._session.next_id("products")
        self._session.upsert_row("products", self._to_raw(product))
        self._session.remember_product(product)

    def delete(self, product: Product) -> None:
        self._session.delete_row("products", product.id)  # type: ignore[arg-type]
        self._session.forget_product(product.id)  # type: ignore[arg-type]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "price": str(product.price.amount),
            "type": product.type,
        }
