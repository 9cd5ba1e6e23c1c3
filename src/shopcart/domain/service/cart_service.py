"""Domain service: Shopping Cart.

Enforces the cart state machine and the aggregate invariants across
create / add / remove / checkout / report.  The service is stateless:
it holds the repositories of the caller's unit of work and a clock,
and every operation is expected to run inside a single unit of work
so that its reads and writes commit or roll back together.

Errors are raised, never logged or retried here.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone
from typing import Callable

from shopcart.domain.exceptions import EntityNotFoundError
from shopcart.domain.model.cart import CartItem, ShoppingCart
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money, Quantity
from shopcart.domain.repository.cart_item_repository import CartItemRepository
from shopcart.domain.repository.cart_repository import CartRepository
from shopcart.domain.repository.product_repository import ProductRepository

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def end_of_day(day: date) -> datetime:
    """First instant after *day* ends, in local time.

    "Created before the end of day D" is then a strict ``<`` comparison
    that still includes 23:59:59.999999 on D.
    """
    return datetime.combine(day + timedelta(days=1), time.min).astimezone()


class CartService:

    def __init__(
        self,
        cart_repo: CartRepository,
        cart_item_repo: CartItemRepository,
        product_repo: ProductRepository,
        clock: Clock = utc_now,
    ) -> None:
        self._cart_repo = cart_repo
        self._cart_item_repo = cart_item_repo
        self._product_repo = product_repo
        self._clock = clock

    def create_cart(self) -> ShoppingCart:
        cart = ShoppingCart.open(self._clock())
        self._cart_repo.save(cart)
        return cart

    def get_cart(self, cart_id: int) -> ShoppingCart:
        cart = self._cart_repo.get_by_id(cart_id)
        if cart is None:
            raise EntityNotFoundError(f"Shopping cart #{cart_id} not found")
        return cart

    def add_item(self, cart_id: int, product_id: int, quantity: int) -> ShoppingCart:
        """Add *quantity* units of a product, accumulating onto an existing line."""
        cart = self.get_cart(cart_id)
        cart.ensure_active("add items to")
        product = self._get_product(product_id)

        item = self._cart_item_repo.find(cart, product)
        if item is not None:
            item.increase(quantity)
        else:
            item = CartItem(
                id=None,
                cart_id=cart.id,
                product=product,
                quantity=Quantity(quantity),
            )
            cart.attach(item)
        self._cart_item_repo.save(item)

        cart.touch(self._clock())
        self._cart_repo.save(cart)
        return cart

    def remove_item(self, cart_id: int, product_id: int, quantity: int) -> ShoppingCart:
        """Remove up to *quantity* units of a product.

        When *quantity* covers everything in the cart the line item is
        deleted; otherwise it is decremented.
        """
        cart = self.get_cart(cart_id)
        cart.ensure_active("remove items from")
        product = self._get_product(product_id)

        item = self._cart_item_repo.find(cart, product)
        if item is None:
            raise EntityNotFoundError(
                f"Product #{product_id} not found in shopping cart #{cart_id}"
            )

        if item.quantity.value <= quantity:
            cart.detach(item)
            self._cart_item_repo.delete(item)
        else:
            item.decrease(quantity)
            self._cart_item_repo.save(item)

        cart.touch(self._clock())
        self._cart_repo.save(cart)
        return cart

    def calculate_total(self, cart_id: int) -> Money:
        return self.get_cart(cart_id).total

    def checkout(self, cart_id: int) -> ShoppingCart:
        cart = self.get_cart(cart_id)
        cart.check_out(self._clock())
        self._cart_repo.save(cart)
        return cart

    def list_abandoned(self, cutoff: date) -> list[ShoppingCart]:
        """Active carts never checked out and created on or before *cutoff*."""
        return self._cart_repo.find_abandoned(end_of_day(cutoff))

    # --- Internal helpers -----------------------------------------------------

    def _get_product(self, product_id: int) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")
        return product
