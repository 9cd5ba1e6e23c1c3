"""Application service: Update Product use case."""

from __future__ import annotations

import structlog

from shopcart.application.validation import require_price, require_text
from shopcart.domain.model.product import Product
from shopcart.domain.repository.unit_of_work import UnitOfWork
from shopcart.domain.service.product_service import ProductService

logger = structlog.get_logger(__name__)


class UpdateProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: int, name: str, price: str, type: str) -> Product:
        """Replace a product's name, price and type.

        Carts reference products, so a new price shows up in the totals
        of every cart that holds the product.
        """
        name = require_text(name, "Product name")
        type = require_text(type, "Product type")
        money = require_price(price)

        with self._uow as uow:
            product = ProductService(uow.products, uow.cart_items).update(
                product_id, name=name, price=money, type=type
            )
            uow.commit()

        logger.info("product_updated", product_id=product_id, price=str(money.amount))
        return product
