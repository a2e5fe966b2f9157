"""CLI commands for the shopping cart."""

from __future__ import annotations

import click

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.checkout import CheckoutHandler
from storefront.application.dto import CheckoutSummaryDTO
from storefront.application.show_cart import ShowCartHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.checkout import SHIPPING_METHODS
from storefront.infrastructure.bootstrap import cart_store, product_repository
from storefront.infrastructure.config import Settings

_SHIPPING_CHOICE = click.Choice([m.id for m in SHIPPING_METHODS])


@click.command("add")
@click.option("--product-id", required=True, help="Catalog product ID.")
@click.pass_obj
def cart_add(config: Settings, product_id: str) -> None:
    """Add one unit of a product to the cart."""
    handler = AddToCartHandler(
        cart_store=cart_store(config),
        product_repo=product_repository(config),
    )

    try:
        line = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} in cart (quantity={line.quantity})")


@click.command("remove")
@click.option("--product-id", required=True, help="Product ID to remove.")
@click.pass_obj
def cart_remove(config: Settings, product_id: str) -> None:
    """Remove a product from the cart."""
    cart_store(config).remove_from_cart(product_id)
    click.echo(f"Product #{product_id} removed from cart.")


@click.command("increment")
@click.option("--product-id", required=True, help="Product ID.")
@click.pass_obj
def cart_increment(config: Settings, product_id: str) -> None:
    """Add one more unit of a product already in the cart."""
    store = cart_store(config)
    store.increment_quantity(product_id)
    _echo_quantity(store.get_line(product_id), product_id)


@click.command("decrement")
@click.option("--product-id", required=True, help="Product ID.")
@click.pass_obj
def cart_decrement(config: Settings, product_id: str) -> None:
    """Take one unit away (never below 1; use 'remove' to drop the line)."""
    store = cart_store(config)
    store.decrement_quantity(product_id)
    _echo_quantity(store.get_line(product_id), product_id)


@click.command("clear")
@click.pass_obj
def cart_clear(config: Settings) -> None:
    """Empty the cart."""
    cart_store(config).clear_cart()
    click.echo("Cart cleared.")


@click.command("show")
@click.option("--shipping", type=_SHIPPING_CHOICE, default="standard", help="Shipping method for the estimate.")
@click.pass_obj
def cart_show(config: Settings, shipping: str) -> None:
    """Show the cart with totals."""
    store = cart_store(config)
    dto = ShowCartHandler(store).handle()

    if not dto.lines:
        click.echo("Cart is empty.")
        return

    click.echo(f"  {'ID':<6} {'Product':<24} {'Qty':>5} {'Price':>12} {'Total':>12}")
    click.echo(f"  {'-'*63}")
    for line in dto.lines:
        click.echo(
            f"  {line.product_id:<6} {line.product_name:<24} {line.quantity:>5} "
            f"{line.unit_price:>12} {line.line_total:>12}"
        )
    click.echo(f"  {'-'*63}")
    click.echo(f"  {'Items':<37} {dto.total_items:>26}")
    try:
        summary = CheckoutHandler(store).preview(shipping)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    _echo_summary(summary)


@click.command("checkout")
@click.option("--shipping", type=_SHIPPING_CHOICE, default="standard", help="Shipping method.")
@click.pass_obj
def cart_checkout(config: Settings, shipping: str) -> None:
    """Place the order and empty the cart."""
    handler = CheckoutHandler(cart_store(config))

    try:
        summary = handler.handle(shipping)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Order placed.")
    _echo_summary(summary)


def _echo_quantity(line, product_id: str) -> None:
    if line is None:
        click.echo(f"Product #{product_id} is not in the cart.")
    else:
        click.echo(f"Product #{product_id} quantity is now {line.quantity}")


def _echo_summary(summary: CheckoutSummaryDTO) -> None:
    """Shared formatting for the price breakdown."""
    click.echo(f"  {'Subtotal':<37} {summary.subtotal:>26}")
    click.echo(f"  {summary.shipping_method + ' (' + summary.estimated_days + ')':<45} {summary.shipping:>18}")
    click.echo(f"  {'Tax':<37} {summary.tax:>26}")
    click.echo(f"  {'Total':<37} {summary.total:>26}")
