"""Application service: Add Item use case.

Orchestrates the flow between the catalog, the drink-pairing engine and
the current order.  Drink pairing is checked before any OrderItem is
built, so a rejected selection never touches the order.
"""

from __future__ import annotations

import structlog

from pos.application.current_order import CurrentOrderResolver
from pos.application.dto import ItemSelectionSpec, OrderItemDTO, item_to_dto
from pos.domain.exceptions import (
    EntityNotFoundError,
    InvalidQuantity,
    RuleViolationError,
    ValidationError,
)
from pos.domain.model.order_item import Customization, OrderItem
from pos.domain.repository.order_store import OrderStore
from pos.domain.repository.product_catalog import ProductCatalog
from pos.domain.service.drink_pairing import DrinkPairingEngine

logger = structlog.get_logger(__name__)


class AddItemHandler:

    def __init__(
        self,
        order_store: OrderStore,
        product_catalog: ProductCatalog,
        drink_engine: DrinkPairingEngine,
    ) -> None:
        self._order_store = order_store
        self._product_catalog = product_catalog
        self._drink_engine = drink_engine

    def handle(self, spec: ItemSelectionSpec) -> OrderItemDTO:
        """Add a product to the current order.

        Steps:
        1. Check the raw input (name present, quantity a positive integer).
        2. Resolve the product name (fail if not found).
        3. Validate drink pairing (drinks on a non-pairing product fail).
        4. Build the OrderItem with the *current* price (snapshot).
        5. Add it to the current order (merging duplicates) and persist.
        """
        self._validate_spec(spec)
        log = logger.bind(product=spec.product_name, quantity=spec.quantity)

        product = self._product_catalog.find_by_name(spec.product_name)
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{spec.product_name}'")

        result = self._drink_engine.validate_drink_selection(product, spec.drinks)
        if not result.is_valid:
            log.warning("order.item_rejected", reason=result.error_message)
            raise RuleViolationError(result)
        for warning in result.warnings:
            log.info("order.item_warning", warning=warning)

        item = OrderItem(
            product=product,
            quantity=spec.quantity,
            customizations=self._build_customizations(spec),
        )

        order = CurrentOrderResolver(self._order_store).resolve()
        stored = order.add_item(item)
        self._order_store.save(order)

        log.info(
            "order.item_added",
            order_id=order.id,
            item_id=stored.id,
            total=str(order.total),
        )
        return item_to_dto(stored)

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _validate_spec(spec: ItemSelectionSpec) -> None:
        if not spec.product_name or not spec.product_name.strip():
            raise ValidationError("Product name is required")
        if isinstance(spec.quantity, bool) or not isinstance(spec.quantity, int):
            raise InvalidQuantity("Quantity must be a whole number")
        if spec.quantity <= 0:
            raise InvalidQuantity("Quantity must be greater than zero")

    @staticmethod
    def _build_customizations(spec: ItemSelectionSpec) -> list[Customization]:
        customizations = [
            Customization.drink(drink.drink_name, drink.quantity) for drink in spec.drinks
        ]
        if spec.cooking_term:
            customizations.append(Customization.cooking_term(spec.cooking_term))
        customizations.extend(
            Customization.special_request(request) for request in spec.special_requests
        )
        return customizations
