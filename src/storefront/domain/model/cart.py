"""CartLine: one product in the cart together with how many units."""

from __future__ import annotations

from dataclasses import dataclass, replace

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class CartLine:
    product: Product
    quantity: Quantity = Quantity(1)

    @property
    def product_id(self) -> str:
        return self.product.id

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity.value

    def incremented(self) -> CartLine:
        return replace(self, quantity=self.quantity.incremented())

    def decremented(self) -> CartLine:
        """Return a line with one unit fewer; a line at 1 is returned unchanged."""
        return replace(self, quantity=self.quantity.decremented())
