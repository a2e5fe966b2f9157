"""Application service: Checkout use case.

Prices the cart with the chosen shipping method and tax. Placing the
order empties the cart; payment and order storage happen elsewhere.
"""

from __future__ import annotations

import logging

from storefront.application.cart_store import CartStore
from storefront.application.dto import CheckoutSummaryDTO
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.checkout import CheckoutSummary, shipping_method

logger = logging.getLogger(__name__)


class CheckoutHandler:

    def __init__(self, cart_store: CartStore) -> None:
        self._cart_store = cart_store

    def preview(self, shipping_method_id: str = "standard") -> CheckoutSummaryDTO:
        return self._to_dto(self._summarize(shipping_method_id))

    def handle(self, shipping_method_id: str = "standard") -> CheckoutSummaryDTO:
        """Place the order for everything in the cart and clear it."""
        if not self._cart_store.lines:
            raise ValidationError("Cart is empty")

        summary = self._summarize(shipping_method_id)
        item_count = self._cart_store.get_total_items()
        self._cart_store.clear_cart()
        logger.info(
            f"Checked out {item_count} item(s) for {summary.total} "
            f"via {summary.method.id}"
        )
        return self._to_dto(summary)

    # --- Internal helpers -----------------------------------------------------

    def _summarize(self, shipping_method_id: str) -> CheckoutSummary:
        method = shipping_method(shipping_method_id)
        subtotal = self._cart_store.get_total_price()
        if subtotal.currency != method.price.currency:
            raise ValidationError(
                f"Shipping is only offered in {method.price.currency}, "
                f"cart is in {subtotal.currency}"
            )
        return CheckoutSummary(method=method, subtotal=subtotal)

    @staticmethod
    def _to_dto(summary: CheckoutSummary) -> CheckoutSummaryDTO:
        return CheckoutSummaryDTO(
            shipping_method=summary.method.name,
            estimated_days=summary.method.estimated_days,
            subtotal=str(summary.subtotal),
            shipping=str(summary.shipping),
            tax=str(summary.tax),
            total=str(summary.total),
        )
