"""CartStore — what the shopper intends to buy right now.

Lines are kept in the order they were first added. Adding a product that
is already in the cart bumps its quantity instead of creating a second
line. Operations naming a product that is not in the cart are no-ops: a
double click on "remove" must not surface an error.

A cart holds one currency, set by its first line. A product priced in
another currency is logged and left out.
"""

from __future__ import annotations

import logging

from storefront.application.store import Store
from storefront.domain.model.cart import CartLine
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.persistence_adapter import PersistenceAdapter

logger = logging.getLogger(__name__)

CartState = tuple[CartLine, ...]

CART_STORAGE_KEY = "cart-storage"


class CartStore(Store[CartState]):

    def __init__(self, adapter: PersistenceAdapter[CartState]) -> None:
        super().__init__(adapter, empty=())

    # --- Queries --------------------------------------------------------------

    @property
    def lines(self) -> CartState:
        return self.state

    def get_line(self, product_id: str) -> CartLine | None:
        for line in self.state:
            if line.product_id == product_id:
                return line
        return None

    def get_total_items(self) -> int:
        return sum(line.quantity.value for line in self.state)

    @property
    def currency(self) -> str | None:
        """Currency of the cart, or None while it is empty."""
        if not self.state:
            return None
        return self.state[0].product.price.currency

    def get_total_price(self) -> Money:
        return Money.total(
            (line.line_total for line in self.state),
            currency=self.currency or "USD",
        )

    # --- Mutations ------------------------------------------------------------

    def add_to_cart(self, product: Product) -> None:
        if self.currency is not None and product.price.currency != self.currency:
            logger.warning(
                f"Product {product.id} is priced in {product.price.currency}, "
                f"cart is in {self.currency}; not added"
            )
            return
        if self.get_line(product.id) is not None:
            self._commit(
                tuple(
                    line.incremented() if line.product_id == product.id else line
                    for line in self.state
                )
            )
        else:
            self._commit(self.state + (CartLine(product=product),))
        logger.debug(f"Added product {product.id} to cart")

    def remove_from_cart(self, product_id: str) -> None:
        if self.get_line(product_id) is None:
            logger.warning(f"Product {product_id} not in cart, nothing to remove")
            return
        self._commit(
            tuple(line for line in self.state if line.product_id != product_id)
        )
        logger.debug(f"Removed product {product_id} from cart")

    def increment_quantity(self, product_id: str) -> None:
        self._update_line(product_id, CartLine.incremented)

    def decrement_quantity(self, product_id: str) -> None:
        # Floors at 1; taking the last unit out is remove_from_cart's job.
        self._update_line(product_id, CartLine.decremented)

    def clear_cart(self) -> None:
        self._commit(())
        logger.debug("Cleared cart")

    # --- Internal helpers -----------------------------------------------------

    def _update_line(self, product_id: str, change) -> None:
        if self.get_line(product_id) is None:
            logger.warning(f"Product {product_id} not in cart, quantity unchanged")
            return
        self._commit(
            tuple(
                change(line) if line.product_id == product_id else line
                for line in self.state
            )
        )
