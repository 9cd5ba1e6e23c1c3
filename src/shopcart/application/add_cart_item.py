"""Application service: Add Item to Cart use case."""

from __future__ import annotations

import structlog

from shopcart.application.dto import CartDTO, to_cart_dto
from shopcart.application.validation import require_quantity
from shopcart.domain.repository.unit_of_work import UnitOfWork
from shopcart.domain.service.cart_service import CartService, Clock, utc_now

logger = structlog.get_logger(__name__)


class AddCartItemHandler:

    def __init__(self, uow: UnitOfWork, clock: Clock = utc_now) -> None:
        self._uow = uow
        self._clock = clock

    def handle(self, cart_id: int, product_id: int, quantity: int = 1) -> CartDTO:
        """Add units of a product; repeated adds accumulate on one line."""
        require_quantity(quantity)

        with self._uow as uow:
            svc = CartService(uow.carts, uow.cart_items, uow.products, self._clock)
            cart = svc.add_item(cart_id, product_id, quantity)
            uow.commit()

        logger.info(
            "cart_item_added",
            cart_id=cart_id,
            product_id=product_id,
            quantity=quantity,
        )
        return to_cart_dto(cart)
