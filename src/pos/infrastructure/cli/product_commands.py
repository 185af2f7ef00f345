"""CLI commands for browsing the menu."""

from __future__ import annotations

import click

from pos.application.validate_product import ValidateProductHandler
from pos.domain.exceptions import DomainException
from pos.domain.model.product import Product, ProductCategory
from pos.infrastructure.bootstrap import drink_pairing_engine, product_catalog
from pos.infrastructure.cli.parsing import parse_drinks


def _display_products(products: list[Product]) -> None:
    if not products:
        click.echo("No products found.")
        return
    click.echo(f"  {'ID':<8} {'Name':<30} {'Category':<12} {'Price':>10}")
    click.echo(f"  {'-'*63}")
    for p in products:
        click.echo(f"  {p.id:<8} {p.name:<30} {p.category.value:<12} {str(p.price):>10}")


@click.command("list")
@click.option(
    "--category",
    default=None,
    type=click.Choice([c.value for c in ProductCategory]),
    help="Only list this category.",
)
def product_list(category: str | None) -> None:
    """List products on the menu."""
    catalog = product_catalog()
    try:
        if category is None:
            products = catalog.find_all()
        else:
            products = catalog.find_by_category(ProductCategory.parse(category))
    except DomainException as exc:
        raise click.ClickException(str(exc))
    _display_products(products)


@click.command("search")
@click.argument("query")
def product_search(query: str) -> None:
    """Search products by name or ingredient."""
    try:
        products = product_catalog().search(query)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    _display_products(products)


@click.command("options")
@click.argument("name")
def product_options(name: str) -> None:
    """Show the drinks that may accompany a product."""
    handler = ValidateProductHandler(product_catalog(), drink_pairing_engine())
    try:
        info = handler.product_info(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if info.name is None:
        raise click.ClickException(f"Product not found: {name}")

    click.echo(f"{info.name}  ({info.category}, {info.price})")
    if not info.requires_drinks:
        click.echo("No drink selection for this product.")
        return
    click.echo(f"Drinks: {info.min_drinks} to {info.max_drinks}")
    for option in info.drink_options:
        click.echo(f"  - {option}")
    if not info.drink_options:
        click.echo("  (served alone)")


@click.command("validate")
@click.argument("name")
@click.option("--drink", "drinks", multiple=True, help="Paired drink as 'Name:Qty' (repeatable).")
@click.option("--qty", "quantity", default=None, type=int, help="Quantity to check.")
@click.option("--cooking-term", default=None, help="Cooking term to check.")
def product_validate(
    name: str,
    drinks: tuple[str, ...],
    quantity: int | None,
    cooking_term: str | None,
) -> None:
    """Check a product selection without adding it."""
    handler = ValidateProductHandler(product_catalog(), drink_pairing_engine())
    try:
        result = handler.handle(
            name,
            drinks=list(parse_drinks(drinks)),
            cooking_term=cooking_term,
            quantity=quantity,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    for warning in result.warnings:
        click.echo(f"warning: {warning}")
    if not result.is_valid:
        raise click.ClickException("; ".join(result.errors))
    click.echo("OK")
