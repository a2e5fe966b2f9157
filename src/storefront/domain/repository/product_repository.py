"""Abstract repository for the product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. The catalog is an outside collaborator of the stores:
application handlers look products up here and hand the value objects
to the stores.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product, ProductCategory


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Product | None:
        """Return a product by its name (case-insensitive), or None."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, in catalog order."""

    def list_by_category(self, category: ProductCategory) -> list[Product]:
        return [p for p in self.list_all() if p.category == category]

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""
