"""Tests for the ValidateProduct query: errors and warnings are collected, never raised."""

import pytest

from pos.application.validate_product import COOKING_TERMS, ValidateProductHandler
from pos.domain.model.drink import DrinkSelection
from pos.domain.service.drink_pairing import DrinkPairingEngine
from tests.fakes import FakeProductCatalog, sample_menu


@pytest.fixture
def handler() -> ValidateProductHandler:
    return ValidateProductHandler(FakeProductCatalog(sample_menu()), DrinkPairingEngine())


class TestValidateSelection:

    def test_valid_liquor_selection(self, handler):
        dto = handler.handle("Ron Bacardi Blanco", [DrinkSelection("Coca Cola", 1)])
        assert dto.is_valid
        assert dto.errors == []
        assert dto.product_name == "Ron Bacardi Blanco"
        assert "Coca Cola" in dto.drink_options

    def test_blank_name(self, handler):
        dto = handler.handle("  ")
        assert not dto.is_valid
        assert dto.errors == ["Product name is required"]

    def test_unknown_product(self, handler):
        dto = handler.handle("Unicorn Tears")
        assert dto.errors == ["Product not found: Unicorn Tears"]

    def test_missing_drinks_reported(self, handler):
        dto = handler.handle("Vodka Absolut")
        assert not dto.is_valid
        assert dto.errors == ["You must select at least 1 drink(s)"]

    def test_errors_accumulate(self, handler):
        dto = handler.handle(
            "Ron Bacardi Blanco",
            [DrinkSelection("Jugo de Naranja", 1)],
            quantity=0,
        )
        assert dto.errors == [
            "Quantity must be greater than zero",
            "Rum cannot be mixed with citrus juices",
        ]

    def test_high_quantity_warns(self, handler):
        dto = handler.handle("Pizza Hawaiana", quantity=80)
        assert dto.is_valid
        assert dto.warnings == ["Unusually high quantity, please double-check"]

    def test_drinks_on_food_warn(self, handler):
        dto = handler.handle("Pizza Hawaiana", [DrinkSelection("Coca Cola", 1)])
        assert dto.is_valid
        assert dto.warnings == ["This product does not take a drink selection"]

    def test_pairing_warnings_are_passed_through(self, handler):
        dto = handler.handle("Ron Bacardi Blanco", [DrinkSelection("Coca Cola", 2)])
        assert dto.is_valid
        assert any("selected more than once" in w for w in dto.warnings)


class TestCookingTerm:

    @pytest.mark.parametrize("term", COOKING_TERMS)
    def test_known_terms_accepted_on_food(self, handler, term):
        assert handler.handle("Arrachera", cooking_term=term).is_valid

    def test_term_is_case_insensitive(self, handler):
        assert handler.handle("Arrachera", cooking_term="Bien Cocido").is_valid

    def test_unknown_term(self, handler):
        dto = handler.handle("Arrachera", cooking_term="quemado")
        assert dto.errors[0].startswith("Invalid cooking term. Options:")

    def test_term_on_liquor_rejected(self, handler):
        dto = handler.handle(
            "Ron Bacardi Blanco",
            [DrinkSelection("Coca Cola", 1)],
            cooking_term="bien cocido",
        )
        assert dto.errors == ["Only food can have a cooking term"]


class TestProductQueries:

    def test_drink_options(self, handler):
        options = handler.drink_options("Botella Ron Bacardi")
        assert options.max_count == 2
        assert options.min_count == 1
        assert not options.is_valid_option("Jugo de Naranja")

    def test_drink_options_unknown(self, handler):
        assert handler.drink_options("Unicorn Tears") is None

    def test_drink_options_for_food_are_empty(self, handler):
        assert not handler.drink_options("Pizza Hawaiana").has_options

    def test_product_exists(self, handler):
        assert handler.product_exists("jägermeister")
        assert not handler.product_exists("Unicorn Tears")

    def test_product_info(self, handler):
        info = handler.product_info("Jägermeister")
        assert info.category == "licores"
        assert info.price == "$100.00"
        assert info.requires_drinks
        assert (info.min_drinks, info.max_drinks) == (0, 0)
        assert info.drink_options == []

    def test_product_info_unknown(self, handler):
        info = handler.product_info("Unicorn Tears")
        assert info.name is None
        assert not info.requires_drinks
