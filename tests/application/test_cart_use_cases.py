"""Integration tests for the cart use cases (handlers over a fake unit of work)."""

from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from shopcart.application.abandoned_carts_report import AbandonedCartsReportHandler
from shopcart.application.add_cart_item import AddCartItemHandler
from shopcart.application.checkout_cart import CheckoutCartHandler
from shopcart.application.create_cart import CreateCartHandler
from shopcart.application.remove_cart_item import RemoveCartItemHandler
from shopcart.application.show_cart import CartTotalHandler, ShowCartHandler
from shopcart.domain.exceptions import (
    EntityNotFoundError,
    InvalidStateError,
    ValidationError,
)
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money
from tests.fakes import FakeUnitOfWork, FixedClock

T0 = datetime(2024, 3, 10, 9, 0, tzinfo=timezone.utc)


def _setup():
    uow = FakeUnitOfWork(
        [
            Product(id=1, name="Laptop", price=Money.of("1000.00"), type="Electronics"),
            Product(id=2, name="Mouse", price=Money.of("25.00"), type="Electronics"),
        ]
    )
    clock = FixedClock(T0)
    cart_id = CreateCartHandler(uow, clock).handle().id
    return uow, clock, cart_id


class TestCreateAndShow:

    def test_create_commits(self):
        uow, _, cart_id = _setup()
        assert uow.committed
        dto = ShowCartHandler(uow).handle(cart_id)
        assert dto.status == "ACTIVE"
        assert dto.items == []
        assert dto.total == "$0.00"
        assert dto.checked_out_at is None
        assert dto.created_at == "2024-03-10 09:00:00+00:00"

    def test_show_missing_cart(self):
        uow, _, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            ShowCartHandler(uow).handle(99)


class TestAddItem:

    def test_add_returns_dto_with_line_totals(self):
        uow, clock, cart_id = _setup()
        dto = AddCartItemHandler(uow, clock).handle(cart_id, 2, 2)
        assert len(dto.items) == 1
        line = dto.items[0]
        assert (line.product_name, line.quantity) == ("Mouse", 2)
        assert line.unit_price == "$25.00"
        assert line.line_total == "$50.00"
        assert dto.total == "$50.00"

    def test_sub_cent_prices_shown_without_rounding(self):
        uow = FakeUnitOfWork(
            [Product(id=1, name="Bolt", price=Money.of("0.015"), type="Hardware")]
        )
        clock = FixedClock(T0)
        cart_id = CreateCartHandler(uow, clock).handle().id
        dto = AddCartItemHandler(uow, clock).handle(cart_id, 1, 3)
        assert dto.items[0].unit_price == "$0.015"
        assert dto.items[0].line_total == "$0.045"
        assert dto.total == "$0.045"

    def test_default_quantity_is_one(self):
        uow, clock, cart_id = _setup()
        dto = AddCartItemHandler(uow, clock).handle(cart_id, 1)
        assert dto.items[0].quantity == 1

    @pytest.mark.parametrize("qty", [0, -2])
    def test_non_positive_quantity_rejected_without_commit(self, qty):
        uow, clock, cart_id = _setup()
        commits = uow.commits
        with pytest.raises(ValidationError, match="at least 1"):
            AddCartItemHandler(uow, clock).handle(cart_id, 1, qty)
        assert uow.commits == commits

    def test_failed_add_does_not_commit(self):
        uow, clock, cart_id = _setup()
        commits = uow.commits
        with pytest.raises(EntityNotFoundError):
            AddCartItemHandler(uow, clock).handle(cart_id, 404, 1)
        assert uow.commits == commits


class TestRemoveItem:

    def test_remove_some(self):
        uow, clock, cart_id = _setup()
        AddCartItemHandler(uow, clock).handle(cart_id, 2, 5)
        dto = RemoveCartItemHandler(uow, clock).handle(cart_id, 2, 2)
        assert dto.items[0].quantity == 3

    def test_omitted_quantity_removes_everything(self):
        uow, clock, cart_id = _setup()
        AddCartItemHandler(uow, clock).handle(cart_id, 2, 5)
        dto = RemoveCartItemHandler(uow, clock).handle(cart_id, 2)
        assert dto.items == []

    def test_omitted_quantity_for_absent_product(self):
        uow, clock, cart_id = _setup()
        with pytest.raises(EntityNotFoundError, match="not found in shopping cart"):
            RemoveCartItemHandler(uow, clock).handle(cart_id, 2)

    def test_zero_quantity_rejected(self):
        uow, clock, cart_id = _setup()
        with pytest.raises(ValidationError):
            RemoveCartItemHandler(uow, clock).handle(cart_id, 2, 0)


class TestTotalAndCheckout:

    def test_total(self):
        uow, clock, cart_id = _setup()
        AddCartItemHandler(uow, clock).handle(cart_id, 1, 1)
        AddCartItemHandler(uow, clock).handle(cart_id, 2, 2)
        assert CartTotalHandler(uow).handle(cart_id).amount == Decimal("1050.00")

    def test_checkout_then_guarded(self):
        uow, clock, cart_id = _setup()
        AddCartItemHandler(uow, clock).handle(cart_id, 1, 1)
        dto = CheckoutCartHandler(uow, clock).handle(cart_id)
        assert dto.status == "CHECKED_OUT"
        assert dto.checked_out_at == "2024-03-10 09:00:00+00:00"

        with pytest.raises(InvalidStateError):
            AddCartItemHandler(uow, clock).handle(cart_id, 2, 1)
        with pytest.raises(InvalidStateError):
            RemoveCartItemHandler(uow, clock).handle(cart_id, 1)
        with pytest.raises(InvalidStateError):
            CheckoutCartHandler(uow, clock).handle(cart_id)


class TestAbandonedReport:

    def test_report_lists_active_carts_only(self):
        uow, clock, first_id = _setup()
        AddCartItemHandler(uow, clock).handle(first_id, 2, 1)
        second_id = CreateCartHandler(uow, clock).handle().id
        CheckoutCartHandler(uow, clock).handle(second_id)

        report = AbandonedCartsReportHandler(uow).handle(date(2024, 3, 11))

        assert [dto.id for dto in report] == [first_id]
        assert report[0].items[0].product_name == "Mouse"

    def test_report_before_creation_is_empty(self):
        uow, _, _ = _setup()
        assert AbandonedCartsReportHandler(uow).handle(date(2024, 3, 8)) == []
