"""Wire mapping for the cart state.

Payload: ``{"cart": [{<product fields>, "quantity": 2}, ...]}``. A line
is the product's own fields with the quantity alongside them.
"""

from __future__ import annotations

from typing import Any

from storefront.application.cart_store import CartState
from storefront.domain.model.cart import CartLine
from storefront.domain.model.value_objects import Quantity
from storefront.infrastructure.persistence.codec import (
    DecodeError,
    StateCodec,
    require,
    require_list,
    stringify_amount,
)
from storefront.infrastructure.persistence.product_codec import (
    product_from_raw,
    product_to_raw,
)


class CartCodec(StateCodec[CartState]):

    def encode(self, state: CartState) -> dict[str, Any]:
        return {"cart": [self._to_raw(line) for line in state]}

    def decode(self, payload: dict[str, Any]) -> CartState:
        lines = tuple(self._to_domain(raw) for raw in require_list(payload, "cart"))
        seen: set[str] = set()
        for line in lines:
            if line.product_id in seen:
                raise DecodeError(f"Duplicate cart line for product {line.product_id}")
            seen.add(line.product_id)
        if len({line.product.price.currency for line in lines}) > 1:
            raise DecodeError("Cart lines are priced in more than one currency")
        return lines

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(line: CartLine) -> dict[str, Any]:
        raw = product_to_raw(line.product)
        raw["quantity"] = line.quantity.value
        return raw

    @staticmethod
    def _to_domain(raw: Any) -> CartLine:
        if not isinstance(raw, dict):
            raise DecodeError(f"Expected a cart line object, got {type(raw).__name__}")
        return CartLine(
            product=product_from_raw(raw),
            quantity=Quantity(require(raw, "quantity", int)),
        )


CART_STATE_VERSION = 1


def _migrate_v0(payload: dict[str, Any]) -> dict[str, Any]:
    """Version 0 blobs stored prices as JSON numbers."""
    lines = [dict(raw) for raw in require_list(payload, "cart")]
    for raw in lines:
        stringify_amount(raw, "price")
    return {**payload, "cart": lines}


CART_MIGRATIONS = {0: _migrate_v0}
