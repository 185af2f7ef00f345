"""Dict-backed OrderStore for a single in-process session."""

from __future__ import annotations

from pos.domain.model.order import Order
from pos.domain.repository.order_store import OrderStore


class InMemoryOrderStore(OrderStore):

    def __init__(self) -> None:
        self._orders: dict[str, Order] = {}
        self._current_order_id: str | None = None

    # --- OrderStore interface -------------------------------------------------

    def get_current_order(self) -> Order | None:
        if self._current_order_id is None:
            return None
        return self._orders.get(self._current_order_id)

    def create_order(self, customer_id: str | None = None) -> Order:
        order = Order.create(customer_id)
        self._orders[order.id] = order
        self._current_order_id = order.id
        return order

    def save(self, order: Order) -> Order:
        self._orders[order.id] = order
        return order

    def clear_current_order(self) -> None:
        self._current_order_id = None

    def find_by_id(self, order_id: str) -> Order | None:
        return self._orders.get(order_id)

    def find_all(self) -> list[Order]:
        return list(self._orders.values())

    def delete(self, order_id: str) -> bool:
        if order_id not in self._orders:
            return False
        del self._orders[order_id]
        if self._current_order_id == order_id:
            self._current_order_id = None
        return True

    # --- Session helpers ------------------------------------------------------

    @property
    def has_current_order(self) -> bool:
        return self._current_order_id is not None

    def __len__(self) -> int:
        return len(self._orders)
