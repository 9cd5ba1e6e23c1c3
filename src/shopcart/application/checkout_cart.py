"""Application service: Checkout Cart use case."""

from __future__ import annotations

import structlog

from shopcart.application.dto import CartDTO, to_cart_dto
from shopcart.domain.repository.unit_of_work import UnitOfWork
from shopcart.domain.service.cart_service import CartService, Clock, utc_now

logger = structlog.get_logger(__name__)


class CheckoutCartHandler:

    def __init__(self, uow: UnitOfWork, clock: Clock = utc_now) -> None:
        self._uow = uow
        self._clock = clock

    def handle(self, cart_id: int) -> CartDTO:
        """Transition ACTIVE -> CHECKED_OUT. A second checkout is an error."""
        with self._uow as uow:
            svc = CartService(uow.carts, uow.cart_items, uow.products, self._clock)
            cart = svc.checkout(cart_id)
            uow.commit()

        logger.info("cart_checked_out", cart_id=cart_id, total=str(cart.total.amount))
        return to_cart_dto(cart)
