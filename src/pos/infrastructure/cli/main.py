import click

from pos.infrastructure.bootstrap import setup_logging
from pos.infrastructure.cli.order_commands import (
    order_add,
    order_cancel,
    order_clear,
    order_complete,
    order_customize,
    order_remove,
    order_show,
    order_update,
)
from pos.infrastructure.cli.product_commands import (
    product_list,
    product_options,
    product_search,
    product_validate,
)


@click.group()
def cli() -> None:
    """POS: restaurant point-of-sale orders."""
    setup_logging()


@cli.group()
def order() -> None:
    """Build and close the current order."""


@cli.group()
def product() -> None:
    """Browse the menu and check drink pairings."""


# Register subcommands
order.add_command(order_add)
order.add_command(order_cancel)
order.add_command(order_clear)
order.add_command(order_complete)
order.add_command(order_customize)
order.add_command(order_remove)
order.add_command(order_show)
order.add_command(order_update)
product.add_command(product_list)
product.add_command(product_options)
product.add_command(product_search)
product.add_command(product_validate)
