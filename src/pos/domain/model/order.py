"""Order aggregate, the core of the domain.

The Order is an aggregate root that owns its items.  The item list is a
tuple that is replaced on every write, and the total is recomputed after
each mutation so it always equals the sum of item subtotals.
"""

from __future__ import annotations

from collections import Counter
from datetime import datetime, timezone
from enum import Enum

from pos.domain.exceptions import InvalidStateTransition
from pos.domain.model.order_item import Customization, OrderItem
from pos.domain.model.value_objects import Money, new_order_id


class OrderStatus(Enum):
    DRAFT = "draft"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _same_customizations(
    first: tuple[Customization, ...], second: tuple[Customization, ...]
) -> bool:
    """Order-independent comparison on kind, name and value."""
    return Counter(c.match_key for c in first) == Counter(c.match_key for c in second)


def _same_line(first: OrderItem, second: OrderItem) -> bool:
    return first.product == second.product and _same_customizations(
        first.customizations, second.customizations
    )


class Order:
    """Aggregate root for a point-of-sale order.

    Use ``Order.create()`` for new orders.  Stores rebuild persisted orders
    through ``Order.restore()``, which recomputes the total from the items
    instead of trusting a stored value.
    """

    def __init__(self, id: str, customer_id: str | None = None) -> None:
        self.id = id
        self.customer_id = customer_id
        self._items: tuple[OrderItem, ...] = ()
        self._total = Money.zero()
        self._status = OrderStatus.DRAFT
        self._created_at = _utcnow()
        self._updated_at = self._created_at

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def create(customer_id: str | None = None) -> Order:
        return Order(new_order_id(), customer_id)

    @staticmethod
    def restore(
        id: str,
        customer_id: str | None,
        items: list[OrderItem],
        status: OrderStatus,
        created_at: datetime,
        updated_at: datetime,
    ) -> Order:
        order = Order(id, customer_id)
        order._items = tuple(items)
        order._status = status
        order._created_at = created_at
        order._updated_at = updated_at
        order._recalculate_total()
        return order

    # --- Read access ----------------------------------------------------------

    @property
    def items(self) -> tuple[OrderItem, ...]:
        return self._items

    @property
    def total(self) -> Money:
        return self._total

    @property
    def status(self) -> OrderStatus:
        return self._status

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    @property
    def can_be_completed(self) -> bool:
        return self._status == OrderStatus.DRAFT and not self.is_empty

    def find_item(self, item_id: str) -> OrderItem | None:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    # --- Item mutations -------------------------------------------------------

    def add_item(self, item: OrderItem) -> OrderItem:
        """Add *item* and return the line now holding it.

        A line with the same product and the same customizations (in any
        order) absorbs the new quantity instead of a second line being
        created; the merged line keeps its original id.
        """
        self._require_draft("add items to")

        result = item
        for index, existing in enumerate(self._items):
            if _same_line(existing, item):
                result = existing.with_quantity(existing.quantity + item.quantity)
                self._replace_at(index, result)
                break
        else:
            self._items = self._items + (item,)

        self._touch()
        return result

    def remove_item(self, item_id: str) -> bool:
        self._require_draft("remove items from")

        remaining = tuple(item for item in self._items if item.id != item_id)
        if len(remaining) == len(self._items):
            return False
        self._items = remaining
        self._touch()
        return True

    def update_item_quantity(self, item_id: str, quantity: int) -> bool:
        """Set an item's quantity; zero or less removes the item."""
        self._require_draft("update items in")

        if quantity <= 0:
            return self.remove_item(item_id)

        index = self._index_of(item_id)
        if index is None:
            return False
        self._replace_at(index, self._items[index].with_quantity(quantity))
        self._touch()
        return True

    def update_item_customizations(
        self, item_id: str, customizations: list[Customization]
    ) -> bool:
        """Replace an item's customizations.

        If another line already holds the same product with the new
        customizations, the item's quantity folds into that line and the
        item itself is dropped.
        """
        self._require_draft("update items in")

        index = self._index_of(item_id)
        if index is None:
            return False
        updated = self._items[index].with_customizations(customizations)

        for other_index, other in enumerate(self._items):
            if other_index != index and _same_line(other, updated):
                self._replace_at(
                    other_index, other.with_quantity(other.quantity + updated.quantity)
                )
                self._items = self._items[:index] + self._items[index + 1:]
                break
        else:
            self._replace_at(index, updated)

        self._touch()
        return True

    def clear(self) -> None:
        self._require_draft("clear")
        self._items = ()
        self._touch()

    # --- State transitions ----------------------------------------------------

    def complete(self) -> None:
        """Transition DRAFT -> COMPLETED; the order must contain items."""
        if not self.can_be_completed:
            raise InvalidStateTransition(
                "Order cannot be completed: must be in draft status and contain items "
                f"(status={self._status.value}, items={len(self._items)})"
            )
        self._status = OrderStatus.COMPLETED
        self._updated_at = _utcnow()

    def cancel(self) -> None:
        """Transition DRAFT -> CANCELLED."""
        if self._status == OrderStatus.COMPLETED:
            raise InvalidStateTransition("Cannot cancel a completed order")
        if self._status == OrderStatus.CANCELLED:
            raise InvalidStateTransition("Order is already cancelled")
        self._status = OrderStatus.CANCELLED
        self._updated_at = _utcnow()

    # --- Internal helpers -----------------------------------------------------

    def _require_draft(self, action: str) -> None:
        if self._status != OrderStatus.DRAFT:
            raise InvalidStateTransition(
                f"Cannot {action} a {self._status.value} order"
            )

    def _index_of(self, item_id: str) -> int | None:
        for index, item in enumerate(self._items):
            if item.id == item_id:
                return index
        return None

    def _replace_at(self, index: int, item: OrderItem) -> None:
        self._items = self._items[:index] + (item,) + self._items[index + 1:]

    def _touch(self) -> None:
        self._recalculate_total()
        self._updated_at = _utcnow()

    def _recalculate_total(self) -> None:
        total = Money.zero()
        for item in self._items:
            total = total + item.subtotal
        self._total = total

    # --- Identity -------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Order):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        lines = "\n".join(f"  {item}" for item in self._items)
        return f"Order {self.id} ({self._status.value}):\n{lines}\nTotal: {self._total}"
