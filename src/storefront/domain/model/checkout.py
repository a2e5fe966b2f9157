"""Checkout pricing: shipping options and sales tax on top of the cart."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from storefront.domain.model.value_objects import Money

TAX_RATE = Decimal("0.08")


@dataclass(frozen=True)
class ShippingMethod:
    id: str
    name: str
    price: Money
    estimated_days: str


SHIPPING_METHODS: tuple[ShippingMethod, ...] = (
    ShippingMethod("standard", "Standard Shipping", Money.of("5.99"), "3-5 business days"),
    ShippingMethod("express", "Express Shipping", Money.of("14.99"), "1-2 business days"),
    ShippingMethod("next-day", "Next Day Air", Money.of("29.99"), "Next business day"),
)


def shipping_method(method_id: str) -> ShippingMethod:
    """Look up a shipping method; unknown ids fall back to standard shipping."""
    for method in SHIPPING_METHODS:
        if method.id == method_id:
            return method
    return SHIPPING_METHODS[0]


@dataclass(frozen=True)
class CheckoutSummary:
    method: ShippingMethod
    subtotal: Money

    @property
    def shipping(self) -> Money:
        return self.method.price

    @property
    def tax(self) -> Money:
        return self.subtotal.times(TAX_RATE)

    @property
    def total(self) -> Money:
        return self.subtotal + self.shipping + self.tax
