"""Product aggregate.

Products live independently of carts. They have their own lifecycle:
they are added to the catalog, revised, and removed from it.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopcart.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    ``id`` is ``None`` until the repository assigns one on first save.
    ``type`` is a free-form category label such as "Electronics".
    Line items reference the product rather than copying its price, so a
    price revision is reflected in every active cart's total.
    """

    id: int | None
    name: str
    price: Money
    type: str

    def revise(self, name: str, price: Money, type: str) -> None:
        """Replace the catalog details of this product."""
        self.name = name
        self.price = price
        self.type = type
