"""Application service: Create Cart use case."""

from __future__ import annotations

import structlog

from shopcart.application.dto import CartDTO, to_cart_dto
from shopcart.domain.repository.unit_of_work import UnitOfWork
from shopcart.domain.service.cart_service import CartService, Clock, utc_now

logger = structlog.get_logger(__name__)


class CreateCartHandler:

    def __init__(self, uow: UnitOfWork, clock: Clock = utc_now) -> None:
        self._uow = uow
        self._clock = clock

    def handle(self) -> CartDTO:
        """Open a new, empty, ACTIVE cart."""
        with self._uow as uow:
            svc = CartService(uow.carts, uow.cart_items, uow.products, self._clock)
            cart = svc.create_cart()
            uow.commit()

        logger.info("cart_created", cart_id=cart.id)
        return to_cart_dto(cart)
