"""Application service: Abandoned Carts Report use case (query)."""

from __future__ import annotations

from datetime import date

from shopcart.application.dto import CartDTO, to_cart_dto
from shopcart.domain.repository.unit_of_work import UnitOfWork
from shopcart.domain.service.cart_service import CartService


class AbandonedCartsReportHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, day: date) -> list[CartDTO]:
        """Carts still ACTIVE that were created on or before *day*."""
        with self._uow as uow:
            svc = CartService(uow.carts, uow.cart_items, uow.products)
            return [to_cart_dto(cart) for cart in svc.list_abandoned(day)]
