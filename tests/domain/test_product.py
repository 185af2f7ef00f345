"""Unit tests for Product and ProductCategory."""

import pytest

from pos.domain.exceptions import ValidationError
from pos.domain.model.product import Product, ProductCategory
from pos.domain.model.value_objects import Money
from tests.fakes import make_product


class TestProductCategory:

    def test_parse_normalises_case_and_whitespace(self):
        assert ProductCategory.parse("  Licores ") is ProductCategory.LICORES

    def test_parse_rejects_unknown(self):
        with pytest.raises(ValidationError, match="Invalid product category"):
            ProductCategory.parse("juguetes")

    def test_parse_rejects_empty(self):
        with pytest.raises(ValidationError, match="cannot be empty"):
            ProductCategory.parse(" ")

    def test_groupings(self):
        assert ProductCategory.LICORES.is_liquor
        assert ProductCategory.CERVEZAS.is_beverage
        assert ProductCategory.REFRESCOS.is_beverage
        assert ProductCategory.COMIDA.is_food
        assert ProductCategory.COCTELES.is_cocktail
        assert not ProductCategory.VINOS.is_beverage


class TestProduct:

    def test_requires_name(self):
        with pytest.raises(ValidationError, match="name cannot be empty"):
            Product(id="1", name="  ", category=ProductCategory.COMIDA, price=Money.of("1"))

    def test_name_length_limit(self):
        with pytest.raises(ValidationError, match="exceed 100"):
            Product(id="1", name="x" * 101, category=ProductCategory.COMIDA, price=Money.of("1"))

    def test_requires_id(self):
        with pytest.raises(ValidationError, match="id cannot be empty"):
            Product(id="", name="Pizza", category=ProductCategory.COMIDA, price=Money.of("1"))

    def test_equality_is_by_id(self):
        a = make_product("Pizza", product_id="same")
        b = make_product("Pizza renamed", product_id="same")
        assert a == b
        assert a != make_product("Pizza")

    def test_is_immutable(self):
        p = make_product()
        with pytest.raises(AttributeError):
            p.name = "Other"  # type: ignore[misc]

    def test_has_ingredient_is_case_insensitive(self):
        p = make_product("Pizza", ProductCategory.COMIDA, ingredients="Jamón, Piña")
        assert p.has_ingredient("piña")
        assert not p.has_ingredient("queso")
