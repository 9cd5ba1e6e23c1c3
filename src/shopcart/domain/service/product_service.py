"""Domain service: Product catalog.

A thin pass-through over the product repository.  Input validation
happens in the application handlers before these methods are called.
"""

from __future__ import annotations

from shopcart.domain.exceptions import EntityNotFoundError, InvalidStateError
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money
from shopcart.domain.repository.cart_item_repository import CartItemRepository
from shopcart.domain.repository.product_repository import ProductRepository


class ProductService:

    def __init__(
        self,
        product_repo: ProductRepository,
        cart_item_repo: CartItemRepository,
    ) -> None:
        self._product_repo = product_repo
        self._cart_item_repo = cart_item_repo

    def create(self, name: str, price: Money, type: str) -> Product:
        product = Product(id=None, name=name, price=price, type=type)
        self._product_repo.save(product)
        return product

    def get(self, product_id: int) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")
        return product

    def list_all(self) -> list[Product]:
        return self._product_repo.list_all()

    def update(self, product_id: int, name: str, price: Money, type: str) -> Product:
        product = self.get(product_id)
        product.revise(name=name, price=price, type=type)
        self._product_repo.save(product)
        return product

    def delete(self, product_id: int) -> None:
        """Remove a product, refusing while any cart still holds it."""
        product = self.get(product_id)
        if self._cart_item_repo.exists_for_product(product_id):
            raise InvalidStateError(
                f"Product #{product_id} is still in a shopping cart and cannot be deleted"
            )
        self._product_repo.delete(product)
