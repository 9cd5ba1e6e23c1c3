"""Application service: Add Product use case."""

from __future__ import annotations

import structlog

from shopcart.application.validation import require_price, require_text
from shopcart.domain.model.product import Product
from shopcart.domain.repository.unit_of_work import UnitOfWork
from shopcart.domain.service.product_service import ProductService

logger = structlog.get_logger(__name__)


class AddProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, name: str, price: str, type: str) -> Product:
        """Add a new product to the catalog."""
        name = require_text(name, "Product name")
        type = require_text(type, "Product type")
        money = require_price(price)

        with self._uow as uow:
            product = ProductService(uow.products, uow.cart_items).create(
                name=name, price=money, type=type
            )
            uow.commit()

        logger.info("product_added", product_id=product.id, name=product.name)
        return product
