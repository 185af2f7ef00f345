"""Application service: Show Order use case (query)."""

from __future__ import annotations

from pos.application.current_order import CurrentOrderResolver
from pos.application.dto import OrderDTO, order_to_dto
from pos.domain.exceptions import EntityNotFoundError
from pos.domain.repository.order_store import OrderStore


class ShowOrderHandler:

    def __init__(self, order_store: OrderStore) -> None:
        self._order_store = order_store

    def handle(self, order_id: str | None = None) -> OrderDTO:
        """Summarise an order by id, or the current order when no id is given."""
        if order_id is None:
            return order_to_dto(CurrentOrderResolver(self._order_store).resolve())

        order = self._order_store.find_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order {order_id} not found")
        return order_to_dto(order)
