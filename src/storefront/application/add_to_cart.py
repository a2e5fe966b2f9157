"""Application service: Add To Cart use case."""

from __future__ import annotations

from storefront.application.cart_store import CartStore
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.cart import CartLine
from storefront.domain.model.product import ProductStatus
from storefront.domain.repository.product_repository import ProductRepository


class AddToCartHandler:

    def __init__(self, cart_store: CartStore, product_repo: ProductRepository) -> None:
        self._cart_store = cart_store
        self._product_repo = product_repo

    def handle(self, product_id: str) -> CartLine:
        """Put one unit of a catalog product in the cart.

        Returns the product's cart line afterwards.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        if product.status == ProductStatus.SOLD:
            raise ValidationError(f"'{product.name}' has already been sold")

        cart_currency = self._cart_store.currency
        if cart_currency is not None and product.price.currency != cart_currency:
            raise ValidationError(
                f"'{product.name}' is priced in {product.price.currency}, "
                f"but the cart is in {cart_currency}"
            )

        self._cart_store.add_to_cart(product)
        line = self._cart_store.get_line(product_id)
        if line is None:
            raise ValidationError(f"'{product.name}' could not be added to the cart")
        return line
