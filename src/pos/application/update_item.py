"""Application services: change the quantity or modifiers of an order line.

Both handlers report a missing item id as ``False`` rather than an error,
and only persist the order when something changed.
"""

from __future__ import annotations

import structlog

from pos.application.current_order import CurrentOrderResolver
from pos.domain.exceptions import InvalidQuantity, RuleViolationError
from pos.domain.model.order_item import Customization
from pos.domain.repository.order_store import OrderStore
from pos.domain.service.drink_pairing import DrinkPairingEngine

logger = structlog.get_logger(__name__)


class UpdateItemQuantityHandler:

    def __init__(self, order_store: OrderStore) -> None:
        self._order_store = order_store

    def handle(self, item_id: str, quantity: int) -> bool:
        """Set a line's quantity.  Zero removes the line; negatives are rejected."""
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise InvalidQuantity("Quantity must be a whole number")
        if quantity < 0:
            raise InvalidQuantity("Quantity cannot be negative")

        order = CurrentOrderResolver(self._order_store).resolve()
        updated = order.update_item_quantity(item_id, quantity)
        if updated:
            self._order_store.save(order)
            logger.info(
                "order.item_quantity_updated",
                order_id=order.id,
                item_id=item_id,
                quantity=quantity,
                total=str(order.total),
            )
        return updated


class UpdateItemCustomizationsHandler:

    def __init__(self, order_store: OrderStore, drink_engine: DrinkPairingEngine) -> None:
        self._order_store = order_store
        self._drink_engine = drink_engine

    def handle(self, item_id: str, customizations: list[Customization]) -> bool:
        """Replace a line's modifiers after re-checking its drink pairing."""
        order = CurrentOrderResolver(self._order_store).resolve()
        item = order.find_item(item_id)
        if item is None:
            return False

        result = self._drink_engine.validate_customizations(item.product, customizations)
        if not result.is_valid:
            logger.warning(
                "order.customizations_rejected",
                item_id=item_id,
                reason=result.error_message,
            )
            raise RuleViolationError(result)

        order.update_item_customizations(item_id, customizations)
        self._order_store.save(order)
        logger.info("order.item_customized", order_id=order.id, item_id=item_id)
        return True
