"""Wire mapping for Product, shared by the cart, reservation and catalog files.

Keys are camelCase, matching the blobs the storefront front end has
always written. Optional attributes that are None are left out.
"""

from __future__ import annotations

from typing import Any, Callable

from storefront.domain.model.product import (
    Product,
    ProductCategory,
    ProductCondition,
    ProductStatus,
    Transmission,
)
from storefront.infrastructure.persistence.codec import (
    DecodeError,
    decode_money,
    encode_money,
    require,
)

def _whole_number(raw: Any) -> int:
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise DecodeError(f"Expected a whole number, got {raw!r}")
    if isinstance(raw, float) and not raw.is_integer():
        raise DecodeError(f"Expected a whole number, got {raw!r}")
    return int(raw)


# (attribute, wire key, encode, decode) for every optional attribute
_OPTIONAL_FIELDS: list[tuple[str, str, Callable[[Any], Any], Callable[[Any], Any]]] = [
    ("status", "status", lambda v: v.value, ProductStatus),
    ("condition", "condition", lambda v: v.value, ProductCondition),
    ("mileage", "mileage", int, _whole_number),
    ("category_id", "categoryId", int, _whole_number),
    ("transmission", "transmission", lambda v: v.value, Transmission),
    ("horsepower", "horsepower", int, _whole_number),
    ("engine_size", "engineSize", str, str),
    ("year", "year", int, _whole_number),
    ("fuel_type", "fuelType", str, str),
    ("vehicle_type", "vehicleType", str, str),
    ("displacement", "displacement", int, _whole_number),
]


def product_to_raw(product: Product) -> dict[str, Any]:
    raw: dict[str, Any] = {
        "id": product.id,
        "name": product.name,
        "price": encode_money(product.price),
        "currency": product.price.currency,
        "description": product.description,
        "image": product.image,
        "category": product.category.value,
    }
    for attr, key, encode, _ in _OPTIONAL_FIELDS:
        value = getattr(product, attr)
        if value is not None:
            raw[key] = encode(value)
    return raw


def product_from_raw(raw: Any) -> Product:
    if not isinstance(raw, dict):
        raise DecodeError(f"Expected a product object, got {type(raw).__name__}")
    try:
        category = ProductCategory(require(raw, "category", str))
    except ValueError as exc:
        raise DecodeError(f"Unknown product category: {raw.get('category')!r}") from exc

    optional: dict[str, Any] = {}
    for attr, key, _, decode in _OPTIONAL_FIELDS:
        value = raw.get(key)
        if value is None:
            continue
        try:
            optional[attr] = decode(value)
        except (TypeError, ValueError) as exc:
            raise DecodeError(f"Invalid product field {key!r}: {value!r}") from exc

    return Product(
        id=str(require(raw, "id", (str, int))),
        name=require(raw, "name", str),
        price=decode_money(raw.get("price"), raw.get("currency", "USD")),
        category=category,
        description=raw.get("description", ""),
        image=raw.get("image", ""),
        **optional,
    )
