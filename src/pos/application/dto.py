"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pos.domain.model.drink import DrinkSelection
from pos.domain.model.order import Order
from pos.domain.model.order_item import OrderItem


@dataclass(frozen=True)
class ItemSelectionSpec:
    """Input: a product picked at the register, with its modifiers."""

    product_name: str
    quantity: int = 1
    drinks: tuple[DrinkSelection, ...] = ()
    cooking_term: str | None = None
    special_requests: tuple[str, ...] = ()


@dataclass(frozen=True)
class OrderItemDTO:
    """Output: a single order line as displayed to the user."""

    id: str
    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$90.00"
    subtotal: str
    customizations: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: str
    customer_id: str | None
    status: str
    items: list[OrderItemDTO]
    item_count: int
    total: str
    can_be_completed: bool
    created_at: str
    updated_at: str


@dataclass(frozen=True)
class ProductValidationDTO:
    """Output: accumulated errors and warnings for a product selection."""

    is_valid: bool
    errors: list[str]
    warnings: list[str]
    product_name: str | None = None
    drink_options: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ProductInfoDTO:
    """Output: a product with its drink-pairing limits."""

    name: str | None
    category: str | None
    price: str | None
    requires_drinks: bool
    min_drinks: int
    max_drinks: int
    drink_options: list[str] = field(default_factory=list)


# --- Mapping ------------------------------------------------------------------


def item_to_dto(item: OrderItem) -> OrderItemDTO:
    return OrderItemDTO(
        id=item.id,
        product_name=item.product.name,
        quantity=item.quantity,
        unit_price=str(item.unit_price),
        subtotal=str(item.subtotal),
        customizations=[f"{c.name}: {c.value}" for c in item.customizations],
    )


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,
        customer_id=order.customer_id,
        status=order.status.value,
        items=[item_to_dto(item) for item in order.items],
        item_count=order.item_count,
        total=str(order.total),
        can_be_completed=order.can_be_completed,
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        updated_at=order.updated_at.strftime("%Y-%m-%d %H:%M UTC"),
    )
