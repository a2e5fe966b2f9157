"""Product value object.

Products are owned by the catalog. The stores only ever hold a product
by value, so a cart line or a reservation keeps the snapshot it was
created with even if the catalog entry changes later.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


class ProductCategory(Enum):
    CARS = "cars"
    MOTORCYCLES = "motorcycles"
    PHONES = "phones"


class ProductStatus(Enum):
    AVAILABLE = "available"
    RESERVED = "reserved"
    SOLD = "sold"


class ProductCondition(Enum):
    NEW = "new"
    PRE_OWNED = "pre-owned"


class Transmission(Enum):
    AUTOMATIC = "automatic"
    MANUAL = "manual"


VEHICLE_CATEGORIES = (ProductCategory.CARS, ProductCategory.MOTORCYCLES)


@dataclass(frozen=True)
class Product:
    """A catalog product.

    Only ``id``, ``name``, ``price`` and ``category`` are required; the
    vehicle details are optional and unused for phones.
    """

    id: str
    name: str
    price: Money
    category: ProductCategory
    description: str = ""
    image: str = ""
    status: ProductStatus | None = None
    condition: ProductCondition | None = None
    mileage: int | None = None
    category_id: int | None = None
    transmission: Transmission | None = None
    horsepower: int | None = None
    engine_size: str | None = None
    year: int | None = None
    fuel_type: str | None = None
    vehicle_type: str | None = None
    displacement: int | None = None  # motorcycles, cc

    def __post_init__(self) -> None:
        if not self.id or not str(self.id).strip():
            raise ValidationError("Product id is required")
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        if not isinstance(self.price, Money):
            raise ValidationError(
                f"Product price must be Money, got {type(self.price).__name__}"
            )

    @property
    def is_vehicle(self) -> bool:
        return self.category in VEHICLE_CATEGORIES
