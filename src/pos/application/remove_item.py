"""Application service: Remove Item use case."""

from __future__ import annotations

import structlog

from pos.application.current_order import CurrentOrderResolver
from pos.domain.repository.order_store import OrderStore

logger = structlog.get_logger(__name__)


class RemoveItemHandler:

    def __init__(self, order_store: OrderStore) -> None:
        self._order_store = order_store

    def handle(self, item_id: str) -> bool:
        """Remove a line from the current order; False if it is not there."""
        order = CurrentOrderResolver(self._order_store).resolve()
        removed = order.remove_item(item_id)
        if removed:
            self._order_store.save(order)
            logger.info("order.item_removed", order_id=order.id, item_id=item_id)
        return removed
