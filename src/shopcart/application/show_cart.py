"""Application service: Show Cart and Cart Total use cases (queries)."""

from __future__ import annotations

from shopcart.application.dto import CartDTO, to_cart_dto
from shopcart.domain.model.value_objects import Money
from shopcart.domain.repository.unit_of_work import UnitOfWork
from shopcart.domain.service.cart_service import CartService


class ShowCartHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, cart_id: int) -> CartDTO:
        with self._uow as uow:
            svc = CartService(uow.carts, uow.cart_items, uow.products)
            return to_cart_dto(svc.get_cart(cart_id))


class CartTotalHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, cart_id: int) -> Money:
        """Exact sum of unit price times quantity over the cart's items."""
        with self._uow as uow:
            svc = CartService(uow.carts, uow.cart_items, uow.products)
            return svc.calculate_total(cart_id)
