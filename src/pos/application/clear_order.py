"""Application service: Clear Order use case (empties the draft in place)."""

from __future__ import annotations

import structlog

from pos.application.current_order import CurrentOrderResolver
from pos.application.dto import OrderDTO, order_to_dto
from pos.domain.repository.order_store import OrderStore

logger = structlog.get_logger(__name__)


class ClearOrderHandler:

    def __init__(self, order_store: OrderStore) -> None:
        self._order_store = order_store

    def handle(self) -> OrderDTO:
        order = CurrentOrderResolver(self._order_store).resolve()
        order.clear()
        self._order_store.save(order)
        logger.info("order.cleared", order_id=order.id)
        return order_to_dto(order)
