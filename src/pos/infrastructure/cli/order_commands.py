"""CLI commands for the current order."""

from __future__ import annotations

import click

from pos.application.add_item import AddItemHandler
from pos.application.cancel_order import CancelOrderHandler
from pos.application.clear_order import ClearOrderHandler
from pos.application.complete_order import CompleteOrderHandler
from pos.application.dto import ItemSelectionSpec, OrderDTO
from pos.application.remove_item import RemoveItemHandler
from pos.application.show_order import ShowOrderHandler
from pos.application.update_item import (
    UpdateItemCustomizationsHandler,
    UpdateItemQuantityHandler,
)
from pos.domain.exceptions import DomainException
from pos.domain.model.order_item import Customization
from pos.infrastructure.bootstrap import (
    drink_pairing_engine,
    order_store,
    product_catalog,
)
from pos.infrastructure.cli.parsing import parse_drinks


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.id}  (status={dto.status})")
    click.echo(f"Updated:  {dto.updated_at}")
    click.echo()
    click.echo(f"  {'Item':<18} {'Product':<28} {'Qty':>4} {'Price':>10} {'Subtotal':>10}")
    click.echo(f"  {'-'*74}")
    for item in dto.items:
        click.echo(
            f"  {item.id:<18} {item.product_name:<28} {item.quantity:>4} "
            f"{item.unit_price:>10} {item.subtotal:>10}"
        )
        for detail in item.customizations:
            click.echo(f"  {'':<18}   + {detail}")
    click.echo(f"  {'-'*74}")
    click.echo(f"  {'Order Total':<52} {dto.total:>21}")


@click.command("add")
@click.option("--product", "product_name", required=True, help="Product name as on the menu.")
@click.option("--qty", "quantity", default=1, show_default=True, type=int, help="Units to add.")
@click.option("--drink", "drinks", multiple=True, help="Paired drink as 'Name:Qty' (repeatable).")
@click.option("--cooking-term", default=None, help="Cooking term for food.")
@click.option("--request", "requests", multiple=True, help="Special request (repeatable).")
def order_add(
    product_name: str,
    quantity: int,
    drinks: tuple[str, ...],
    cooking_term: str | None,
    requests: tuple[str, ...],
) -> None:
    """Add a product to the current order."""
    spec = ItemSelectionSpec(
        product_name=product_name,
        quantity=quantity,
        drinks=parse_drinks(drinks),
        cooking_term=cooking_term,
        special_requests=requests,
    )
    handler = AddItemHandler(
        order_store=order_store(),
        product_catalog=product_catalog(),
        drink_engine=drink_pairing_engine(),
    )

    try:
        item = handler.handle(spec)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Added {item.product_name}  "
        f"(item={item.id}, qty={item.quantity}, subtotal={item.subtotal})"
    )


@click.command("remove")
@click.option("--item", "item_id", required=True, help="Item ID to remove.")
def order_remove(item_id: str) -> None:
    """Remove an item from the current order."""
    try:
        removed = RemoveItemHandler(order_store()).handle(item_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Item {item_id} removed." if removed else f"Item {item_id} is not in the order.")


@click.command("update")
@click.option("--item", "item_id", required=True, help="Item ID to update.")
@click.option("--qty", "quantity", required=True, type=int, help="New quantity (0 removes).")
def order_update(item_id: str, quantity: int) -> None:
    """Change the quantity of an item in the current order."""
    try:
        updated = UpdateItemQuantityHandler(order_store()).handle(item_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Item {item_id} updated." if updated else f"Item {item_id} is not in the order.")


@click.command("show")
@click.option("--id", "order_id", default=None, help="Order ID (defaults to the current order).")
def order_show(order_id: str | None) -> None:
    """Show the current order, or any order by id."""
    try:
        dto = ShowOrderHandler(order_store()).handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("complete")
def order_complete() -> None:
    """Complete the current order."""
    try:
        dto = CompleteOrderHandler(order_store()).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.id} completed. Total {dto.total}.")


@click.command("cancel")
def order_cancel() -> None:
    """Cancel the current order."""
    try:
        dto = CancelOrderHandler(order_store()).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.id} cancelled.")


@click.command("clear")
def order_clear() -> None:
    """Remove every item from the current order."""
    try:
        dto = ClearOrderHandler(order_store()).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.id} cleared.")


@click.command("customize")
@click.option("--item", "item_id", required=True, help="Item ID to change.")
@click.option("--drink", "drinks", multiple=True, help="Paired drink as 'Name:Qty' (repeatable).")
@click.option("--cooking-term", default=None, help="Cooking term for food.")
@click.option("--request", "requests", multiple=True, help="Special request (repeatable).")
def order_customize(
    item_id: str,
    drinks: tuple[str, ...],
    cooking_term: str | None,
    requests: tuple[str, ...],
) -> None:
    """Replace the drinks and modifiers of an item."""
    customizations = [
        Customization.drink(d.drink_name, d.quantity) for d in parse_drinks(drinks)
    ]
    if cooking_term:
        customizations.append(Customization.cooking_term(cooking_term))
    customizations.extend(Customization.special_request(r) for r in requests)

    handler = UpdateItemCustomizationsHandler(order_store(), drink_pairing_engine())
    try:
        updated = handler.handle(item_id, customizations)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Item {item_id} updated." if updated else f"Item {item_id} is not in the order.")
