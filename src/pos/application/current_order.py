"""Resolve-or-create access to the session's current order."""

from __future__ import annotations

import structlog

from pos.domain.model.order import Order
from pos.domain.repository.order_store import OrderStore

logger = structlog.get_logger(__name__)


class CurrentOrderResolver:

    def __init__(self, order_store: OrderStore) -> None:
        self._order_store = order_store

    def resolve(self) -> Order:
        """Return the current order, starting a new draft if there is none."""
        order = self._order_store.get_current_order()
        if order is None:
            order = self._order_store.create_order()
            logger.info("order.created", order_id=order.id)
        return order
