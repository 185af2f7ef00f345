"""Integration tests for the AddItem use case.

Uses the fake catalog and the in-memory order store, so there is no file I/O.
"""

import pytest

from pos.application.add_item import AddItemHandler
from pos.application.dto import ItemSelectionSpec
from pos.domain.exceptions import (
    EntityNotFoundError,
    InvalidQuantity,
    RuleViolationError,
    ValidationError,
)
from pos.domain.model.drink import DrinkSelection
from pos.domain.model.order_item import CustomizationKind
from pos.domain.model.value_objects import Money
from pos.domain.service.drink_pairing import DrinkPairingEngine
from pos.infrastructure.persistence.in_memory_order_store import InMemoryOrderStore
from tests.fakes import FakeProductCatalog, make_product, sample_menu


def _setup() -> tuple[AddItemHandler, InMemoryOrderStore, FakeProductCatalog]:
    store = InMemoryOrderStore()
    catalog = FakeProductCatalog(sample_menu())
    handler = AddItemHandler(store, catalog, DrinkPairingEngine())
    return handler, store, catalog


def _spec(name: str, quantity: int = 1, *drinks: tuple[str, int], **kwargs) -> ItemSelectionSpec:
    selections = tuple(DrinkSelection(drink, qty) for drink, qty in drinks)
    return ItemSelectionSpec(name, quantity, drinks=selections, **kwargs)


class TestAddItemHappyPath:

    def test_adds_liquor_with_drinks(self):
        handler, store, _ = _setup()
        dto = handler.handle(_spec("Ron Bacardi Blanco", 2, ("Coca Cola", 1)))

        assert dto.product_name == "Ron Bacardi Blanco"
        assert dto.quantity == 2
        assert dto.subtotal == "$180.00"
        assert dto.customizations == ["Coca Cola: 1"]

        order = store.get_current_order()
        assert order is not None
        assert order.total == Money.of("180.00")

    def test_first_addition_creates_current_order(self):
        handler, store, _ = _setup()
        assert store.get_current_order() is None
        handler.handle(_spec("Pizza Hawaiana"))
        assert store.get_current_order() is not None
        assert len(store) == 1

    def test_lookup_is_case_insensitive(self):
        handler, _, _ = _setup()
        dto = handler.handle(_spec("pizza hawaiana"))
        assert dto.product_name == "Pizza Hawaiana"

    def test_food_with_cooking_term_and_requests(self):
        handler, store, _ = _setup()
        handler.handle(
            _spec(
                "Arrachera",
                1,
                cooking_term="término medio",
                special_requests=("sin cebolla",),
            )
        )
        item = store.get_current_order().items[0]
        assert item.cooking_term == "término medio"
        assert [c.value for c in item.special_requests] == ["sin cebolla"]
        assert not item.has_drink_selection

    def test_jagermeister_without_drinks(self):
        handler, store, _ = _setup()
        handler.handle(_spec("Jägermeister"))
        assert store.get_current_order().item_count == 1

    def test_rum_bottle_with_mixers(self):
        handler, store, _ = _setup()
        handler.handle(_spec("Botella Ron Bacardi", 1, ("Coca Cola", 1), ("Hielos", 1)))
        drinks = store.get_current_order().items[0].customizations
        assert all(c.kind is CustomizationKind.DRINK for c in drinks)
        assert [c.value for c in drinks] == ["1", "1"]


class TestAddItemMerging:

    def test_same_selection_merges_into_one_line(self):
        handler, store, _ = _setup()
        first = handler.handle(_spec("Ron Bacardi Blanco", 1, ("Coca Cola", 1)))
        second = handler.handle(_spec("Ron Bacardi Blanco", 2, ("Coca Cola", 1)))

        order = store.get_current_order()
        assert len(order.items) == 1
        assert second.id == first.id
        assert second.quantity == 3
        assert order.total == Money.of("270.00")

    def test_different_drinks_make_separate_lines(self):
        handler, store, _ = _setup()
        handler.handle(_spec("Ron Bacardi Blanco", 1, ("Coca Cola", 1)))
        handler.handle(_spec("Ron Bacardi Blanco", 1, ("Sprite", 1)))
        assert len(store.get_current_order().items) == 2


class TestAddItemPriceSnapshot:

    def test_later_price_change_does_not_affect_line(self):
        handler, store, catalog = _setup()
        handler.handle(_spec("Pizza Hawaiana", 2))

        catalog.add(
            make_product(
                "Pizza Hawaiana",
                price="999.00",
                product_id="pizza",
            )
        )
        order = store.get_current_order()
        assert order.items[0].unit_price == Money.of("180")
        assert order.total == Money.of("360")


class TestAddItemValidation:

    def test_unknown_product(self):
        handler, store, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Product not found"):
            handler.handle(_spec("Unicorn Tears"))
        assert store.get_current_order() is None

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name(self, name):
        handler, _, _ = _setup()
        with pytest.raises(ValidationError, match="Product name is required"):
            handler.handle(_spec(name))

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_non_positive_quantity(self, quantity):
        handler, _, _ = _setup()
        with pytest.raises(InvalidQuantity, match="greater than zero"):
            handler.handle(_spec("Pizza Hawaiana", quantity))

    def test_fractional_quantity(self):
        handler, _, _ = _setup()
        with pytest.raises(InvalidQuantity, match="whole number"):
            handler.handle(ItemSelectionSpec("Pizza Hawaiana", 1.5))  # type: ignore[arg-type]

    def test_invalid_quantity_is_a_validation_error(self):
        assert issubclass(InvalidQuantity, ValidationError)


class TestAddItemDrinkRules:

    def test_liquor_without_drinks_is_rejected(self):
        handler, store, _ = _setup()
        with pytest.raises(RuleViolationError, match="at least 1 drink"):
            handler.handle(_spec("Tequila Jimador Reposado"))
        assert store.get_current_order() is None

    def test_rum_with_citrus_is_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(RuleViolationError) as excinfo:
            handler.handle(_spec("Ron Bacardi Blanco", 1, ("Jugo de Naranja", 1)))
        assert excinfo.value.result.error_message == "Rum cannot be mixed with citrus juices"

    def test_jagermeister_with_drink_is_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(RuleViolationError, match="served alone"):
            handler.handle(_spec("Jägermeister", 1, ("Coca Cola", 1)))

    def test_jagermeister_bottle_with_drink_is_rejected(self):
        handler, store, _ = _setup()
        with pytest.raises(RuleViolationError, match="served alone"):
            handler.handle(_spec("Jägermeister 700ml", 1, ("Coca Cola", 2)))
        assert store.get_current_order() is None

    def test_rum_bottle_with_citrus_is_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(RuleViolationError, match="citrus"):
            handler.handle(_spec("Botella Ron Bacardi", 1, ("Jugo de Naranja", 2)))

    def test_too_many_drinks(self):
        handler, _, _ = _setup()
        with pytest.raises(RuleViolationError, match="more than 2"):
            handler.handle(_spec("Vodka Absolut", 1, ("Coca Cola", 2), ("Hielos", 1)))

    def test_juice_and_soda_are_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(RuleViolationError, match="Juices cannot be mixed with sodas"):
            handler.handle(_spec("Vodka Absolut", 1, ("Jugo de Naranja", 1), ("Sprite", 1)))

    def test_rejection_leaves_existing_order_untouched(self):
        handler, store, _ = _setup()
        handler.handle(_spec("Pizza Hawaiana"))
        with pytest.raises(RuleViolationError):
            handler.handle(_spec("Whisky Red Label", 1, ("Jugo de Arándano", 1)))
        order = store.get_current_order()
        assert len(order.items) == 1
        assert order.total == Money.of("180")

    def test_drinks_on_food_are_rejected(self):
        handler, store, _ = _setup()
        with pytest.raises(RuleViolationError, match="does not allow drink selection"):
            handler.handle(_spec("Pizza Hawaiana", 1, ("Coca Cola", 1)))
        assert store.get_current_order() is None

    def test_digestivo_needs_no_drinks(self):
        handler, store, _ = _setup()
        handler.handle(_spec("Licor Digestivo de Hierbas"))
        assert store.get_current_order().item_count == 1
