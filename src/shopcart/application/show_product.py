"""Application service: Show / List Products use cases (queries)."""

from __future__ import annotations

from shopcart.domain.model.product import Product
from shopcart.domain.repository.unit_of_work import UnitOfWork
from shopcart.domain.service.product_service import ProductService


class ShowProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: int) -> Product:
        with self._uow as uow:
            return ProductService(uow.products, uow.cart_items).get(product_id)


class ListProductsHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[Product]:
        with self._uow as uow:
            return ProductService(uow.products, uow.cart_items).list_all()
