"""Application service: Add Product use case."""

from __future__ import annotations

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product, ProductCategory, ProductStatus
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        price: str,
        category: str,
        description: str = "",
        image: str = "",
    ) -> Product:
        """Add a new, available product to the catalog."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        existing = self._product_repo.get_by_name(name.strip())
        if existing is not None:
            raise ValidationError(f"Product '{name}' already exists")

        try:
            product_category = ProductCategory(category)
        except ValueError:
            raise ValidationError(f"Unknown category '{category}'")

        # Auto-assign the next numeric ID; non-numeric IDs are skipped
        numeric_ids = [int(p.id) for p in self._product_repo.list_all() if p.id.isdigit()]
        next_id = str(max(numeric_ids) + 1) if numeric_ids else "1"

        product = Product(
            id=next_id,
            name=name.strip(),
            price=Money.of(price),
            category=product_category,
            description=description,
            image=image,
            status=ProductStatus.AVAILABLE,
        )
        self._product_repo.save(product)
        return product
