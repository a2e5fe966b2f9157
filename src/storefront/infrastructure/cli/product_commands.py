"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from storefront.application.add_product import AddProductHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.product import ProductCategory
from storefront.infrastructure.bootstrap import product_repository
from storefront.infrastructure.config import Settings


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 45000.00).")
@click.option(
    "--category",
    required=True,
    type=click.Choice([c.value for c in ProductCategory]),
    help="Catalog category.",
)
@click.option("--description", default="", help="Short description.")
@click.pass_obj
def product_add(config: Settings, name: str, price: str, category: str, description: str) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository(config))

    try:
        product = handler.handle(
            name=name, price=price, category=category, description=description
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("list")
@click.option(
    "--category",
    type=click.Choice([c.value for c in ProductCategory]),
    default=None,
    help="Only list this category.",
)
@click.pass_obj
def product_list(config: Settings, category: str | None) -> None:
    """List products in the catalog."""
    repo = product_repository(config)
    if category is None:
        products = repo.list_all()
    else:
        products = repo.list_by_category(ProductCategory(category))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<28} {'Category':<12} {'Price':>12}")
    click.echo("-" * 61)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<28} {p.category.value:<12} {str(p.price):>12}")
