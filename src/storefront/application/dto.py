"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartLineDTO:
    product_id: str
    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    lines: list[CartLineDTO]
    total_items: int
    total_price: str


@dataclass(frozen=True)
class CheckoutSummaryDTO:
    shipping_method: str
    estimated_days: str
    subtotal: str
    shipping: str
    tax: str
    total: str


@dataclass(frozen=True)
class ReservationDTO:
    id: str
    product_name: str
    date: str
    fee: str
    status: str
    contact_name: str
    contact_email: str
    contact_phone: str
    needs_contact_update: bool
