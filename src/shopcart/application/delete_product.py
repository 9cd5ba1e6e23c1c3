"""Application service: Delete Product use case."""

from __future__ import annotations

import structlog

from shopcart.domain.repository.unit_of_work import UnitOfWork
from shopcart.domain.service.product_service import ProductService

logger = structlog.get_logger(__name__)


class DeleteProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: int) -> None:
        with self._uow as uow:
            ProductService(uow.products, uow.cart_items).delete(product_id)
            uow.commit()

        logger.info("product_deleted", product_id=product_id)
