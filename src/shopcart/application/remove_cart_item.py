"""Application service: Remove Item from Cart use case.

The quantity is optional here.  Omitting it means "remove every unit of
the product", which is resolved to the line's current quantity before
the domain service is called.
"""

from __future__ import annotations

import structlog

from shopcart.application.dto import CartDTO, to_cart_dto
from shopcart.application.validation import require_quantity
from shopcart.domain.repository.unit_of_work import UnitOfWork
from shopcart.domain.service.cart_service import CartService, Clock, utc_now

logger = structlog.get_logger(__name__)


class RemoveCartItemHandler:

    def __init__(self, uow: UnitOfWork, clock: Clock = utc_now) -> None:
        self._uow = uow
        self._clock = clock

    def handle(
        self,
        cart_id: int,
        product_id: int,
        quantity: int | None = None,
    ) -> CartDTO:
        if quantity is not None:
            require_quantity(quantity)

        with self._uow as uow:
            svc = CartService(uow.carts, uow.cart_items, uow.products, self._clock)
            if quantity is None:
                # Absent product still reaches the service, which reports it
                in_cart = svc.get_cart(cart_id).quantity_of(product_id)
                quantity = max(in_cart, 1)
            cart = svc.remove_item(cart_id, product_id, quantity)
            uow.commit()

        logger.info(
            "cart_item_removed",
            cart_id=cart_id,
            product_id=product_id,
            quantity=quantity,
        )
        return to_cart_dto(cart)
