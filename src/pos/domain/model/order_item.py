"""Order items and the customizations attached to them.

An OrderItem is immutable.  The Order aggregate applies quantity and
customization changes by swapping in the copy returned from
``with_quantity()`` / ``with_customizations()``, which keeps the same id.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from pos.domain.exceptions import InvalidQuantity, RuleViolationError
from pos.domain.model.drink import DrinkSelection
from pos.domain.model.product import Product
from pos.domain.model.validation import ValidationResult
from pos.domain.model.value_objects import Money, new_item_id

COOKING_TERM_LABEL = "Término de cocción"
SPECIAL_REQUEST_LABEL = "Solicitud especial"


class CustomizationKind(Enum):
    DRINK = "drink"
    COOKING_TERM = "cooking_term"
    SPECIAL_REQUEST = "special_request"


@dataclass(frozen=True)
class Customization:
    """A modifier on an order item: paired drink, cooking term or request.

    For drinks, ``value`` holds the unit count as text (e.g. ``"2"``).
    """

    kind: CustomizationKind
    name: str
    value: str
    additional_cost: Money | None = None

    @staticmethod
    def drink(name: str, quantity: int = 1) -> Customization:
        return Customization(CustomizationKind.DRINK, name, str(quantity))

    @staticmethod
    def cooking_term(term: str) -> Customization:
        return Customization(CustomizationKind.COOKING_TERM, COOKING_TERM_LABEL, term)

    @staticmethod
    def special_request(request: str) -> Customization:
        return Customization(
            CustomizationKind.SPECIAL_REQUEST, SPECIAL_REQUEST_LABEL, request
        )

    @property
    def match_key(self) -> tuple[str, str, str]:
        """Fields that decide whether two customizations are the same."""
        return (self.kind.value, self.name, self.value)


def drink_selection_from(customization: Customization) -> DrinkSelection:
    """Read a drink customization back as a DrinkSelection.

    Raises RuleViolationError when the stored quantity is not a whole number.
    """
    raw = customization.value.strip()
    try:
        quantity = int(raw)
    except ValueError:
        raise RuleViolationError(
            ValidationResult.failure(
                f"Invalid quantity '{customization.value}' for drink: {customization.name}"
            )
        ) from None
    return DrinkSelection(customization.name, quantity)


@dataclass(frozen=True, eq=False)
class OrderItem:
    """One line of an order.

    ``unit_price`` is a snapshot taken when the item is built, so later
    catalog price changes never alter existing items.  Equality is by id.
    """

    product: Product
    quantity: int
    customizations: tuple[Customization, ...] = field(default_factory=tuple)
    unit_price: Money | None = None  # defaults to product.price
    id: str = field(default_factory=new_item_id)

    def __post_init__(self) -> None:
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise InvalidQuantity(
                f"Order item quantity must be a whole number, got {self.quantity!r}"
            )
        if self.quantity <= 0:
            raise InvalidQuantity("Order item quantity must be greater than zero")
        object.__setattr__(self, "customizations", tuple(self.customizations))
        if self.unit_price is None:
            object.__setattr__(self, "unit_price", self.product.price)

    # --- Pricing --------------------------------------------------------------

    @property
    def subtotal(self) -> Money:
        result = self.unit_price * self.quantity
        for customization in self.customizations:
            if customization.additional_cost is not None:
                result = result + customization.additional_cost * self.quantity
        return result

    # --- Customization views --------------------------------------------------

    @property
    def selected_drinks(self) -> tuple[Customization, ...]:
        return self._of_kind(CustomizationKind.DRINK)

    @property
    def special_requests(self) -> tuple[Customization, ...]:
        return self._of_kind(CustomizationKind.SPECIAL_REQUEST)

    @property
    def cooking_term(self) -> str | None:
        terms = self._of_kind(CustomizationKind.COOKING_TERM)
        return terms[0].value if terms else None

    @property
    def has_customizations(self) -> bool:
        return bool(self.customizations)

    @property
    def has_drink_selection(self) -> bool:
        return bool(self.selected_drinks)

    @property
    def total_drinks_count(self) -> int:
        return sum(drink_selection_from(c).quantity for c in self.selected_drinks)

    def drink_selections(self) -> list[DrinkSelection]:
        return [drink_selection_from(c) for c in self.selected_drinks]

    # --- Copies ---------------------------------------------------------------

    def with_quantity(self, quantity: int) -> OrderItem:
        return OrderItem(
            product=self.product,
            quantity=quantity,
            customizations=self.customizations,
            unit_price=self.unit_price,
            id=self.id,
        )

    def with_customizations(
        self, customizations: tuple[Customization, ...] | list[Customization]
    ) -> OrderItem:
        return OrderItem(
            product=self.product,
            quantity=self.quantity,
            customizations=tuple(customizations),
            unit_price=self.unit_price,
            id=self.id,
        )

    # --- Identity -------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderItem):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        details = ""
        if self.customizations:
            details = " (" + ", ".join(f"{c.name}: {c.value}" for c in self.customizations) + ")"
        return f"{self.quantity}x {self.product.name}{details} - {self.subtotal}"

    def _of_kind(self, kind: CustomizationKind) -> tuple[Customization, ...]:
        return tuple(c for c in self.customizations if c.kind is kind)
