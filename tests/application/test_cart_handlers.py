"""Tests for the cart use cases: add to cart, show cart, checkout."""

import pytest

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.cart_store import CartStore
from storefront.application.checkout import CheckoutHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.product import Product, ProductCategory, ProductStatus
from storefront.domain.model.value_objects import Money, Quantity
from tests.fakes import FakeAdapter, FakeProductRepository

PHONE = Product(id="1", name="Pixel", price=Money.of("100"), category=ProductCategory.PHONES)
CASE = Product(id="2", name="Case", price=Money.of("19.99"), category=ProductCategory.PHONES)
SOLD_CAR = Product(
    id="3",
    name="Old Beetle",
    price=Money.of("9000"),
    category=ProductCategory.CARS,
    status=ProductStatus.SOLD,
)


def _setup() -> tuple[CartStore, FakeAdapter, FakeProductRepository]:
    adapter = FakeAdapter()
    store = CartStore(adapter)
    store.initialize()
    return store, adapter, FakeProductRepository([PHONE, CASE, SOLD_CAR])


class TestAddToCartHandler:

    def test_returns_the_updated_line(self):
        store, _, repo = _setup()
        handler = AddToCartHandler(store, repo)
        assert handler.handle("1").quantity == Quantity(1)
        line = handler.handle("1")
        assert line.product == PHONE
        assert line.quantity == Quantity(2)
        assert store.get_total_items() == 2

    def test_unknown_product(self):
        store, adapter, repo = _setup()
        with pytest.raises(EntityNotFoundError):
            AddToCartHandler(store, repo).handle("404")
        assert adapter.saved == []

    def test_other_currency_refused(self):
        store, _, repo = _setup()
        repo.save(
            Product(
                id="9",
                name="Vespa",
                price=Money.of("3000", "EUR"),
                category=ProductCategory.MOTORCYCLES,
            )
        )
        AddToCartHandler(store, repo).handle("1")

        with pytest.raises(ValidationError, match="priced in EUR"):
            AddToCartHandler(store, repo).handle("9")
        assert store.get_line("9") is None

    def test_sold_product_refused(self):
        store, _, repo = _setup()
        with pytest.raises(ValidationError, match="already been sold"):
            AddToCartHandler(store, repo).handle("3")
        assert store.lines == ()


class TestShowCartHandler:

    def test_empty_cart(self):
        store, _, _ = _setup()
        dto = ShowCartHandler(store).handle()
        assert dto.lines == []
        assert dto.total_items == 0
        assert dto.total_price == "$0.00"

    def test_lines_and_totals(self):
        store, _, _ = _setup()
        store.add_to_cart(PHONE)
        store.add_to_cart(PHONE)
        store.add_to_cart(CASE)

        dto = ShowCartHandler(store).handle()

        assert [(l.product_name, l.quantity) for l in dto.lines] == [("Pixel", 2), ("Case", 1)]
        assert dto.lines[0].unit_price == "$100.00"
        assert dto.lines[0].line_total == "$200.00"
        assert dto.total_items == 3
        assert dto.total_price == "$219.99"


class TestCheckoutHandler:

    def test_preview_leaves_cart_alone(self):
        store, _, _ = _setup()
        store.add_to_cart(PHONE)
        store.add_to_cart(PHONE)

        summary = CheckoutHandler(store).preview()

        assert summary.subtotal == "$200.00"
        assert summary.shipping == "$5.99"
        assert summary.tax == "$16.00"
        assert summary.total == "$221.99"
        assert store.get_total_items() == 2

    def test_checkout_clears_cart(self):
        store, adapter, _ = _setup()
        store.add_to_cart(CASE)

        summary = CheckoutHandler(store).handle("next-day")

        assert summary.shipping_method == "Next Day Air"
        assert summary.shipping == "$29.99"
        assert summary.total == "$51.58"
        assert store.lines == ()
        assert adapter.last_saved == ()

    def test_unknown_method_falls_back_to_standard(self):
        store, _, _ = _setup()
        store.add_to_cart(PHONE)
        assert CheckoutHandler(store).preview("teleport").shipping == "$5.99"

    def test_foreign_currency_cart_cannot_be_priced(self):
        store, _, _ = _setup()
        store.add_to_cart(
            Product(
                id="9",
                name="Vespa",
                price=Money.of("3000", "EUR"),
                category=ProductCategory.MOTORCYCLES,
            )
        )
        with pytest.raises(ValidationError, match="only offered in USD"):
            CheckoutHandler(store).preview()

    def test_empty_cart_refused(self):
        store, _, _ = _setup()
        with pytest.raises(ValidationError, match="Cart is empty"):
            CheckoutHandler(store).handle()
