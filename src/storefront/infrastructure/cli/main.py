import click

from storefront.infrastructure import bootstrap
from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_checkout,
    cart_clear,
    cart_decrement,
    cart_increment,
    cart_remove,
    cart_show,
)
from storefront.infrastructure.cli.product_commands import product_add, product_list
from storefront.infrastructure.cli.reservation_commands import (
    reservation_cancel,
    reservation_clear,
    reservation_complete,
    reservation_create,
    reservation_list,
    reservation_pay,
    reservation_quick,
    reservation_remove,
    reservation_sample,
    reservation_update_contact,
)
from storefront.infrastructure.logging_config import setup_logging


@click.group()
@click.option("--log-level", default=None, help="Override STOREFRONT_LOG_LEVEL.")
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Storefront: shopping cart and vehicle reservations."""
    config = bootstrap.settings()
    setup_logging("storefront", log_level or config.log_level)
    ctx.obj = config


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def cart() -> None:
    """Manage the shopping cart."""


@cli.group()
def reservation() -> None:
    """Manage vehicle reservations."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_list)
cart.add_command(cart_add)
cart.add_command(cart_remove)
cart.add_command(cart_increment)
cart.add_command(cart_decrement)
cart.add_command(cart_clear)
cart.add_command(cart_show)
cart.add_command(cart_checkout)
reservation.add_command(reservation_create)
reservation.add_command(reservation_quick)
reservation.add_command(reservation_sample)
reservation.add_command(reservation_list)
reservation.add_command(reservation_pay)
reservation.add_command(reservation_cancel)
reservation.add_command(reservation_complete)
reservation.add_command(reservation_update_contact)
reservation.add_command(reservation_remove)
reservation.add_command(reservation_clear)
