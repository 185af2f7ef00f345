"""Product aggregate.

Products live independently of orders and are served read-only by the
Product Catalog.  Order items hold a shared reference to a Product but
capture their own unit-price snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from pos.domain.exceptions import ValidationError
from pos.domain.model.value_objects import Money

MAX_NAME_LENGTH = 100


class ProductCategory(Enum):
    BEBIDAS = "bebidas"
    COMIDA = "comida"
    LICORES = "licores"
    COCTELES = "cocteles"
    REFRESCOS = "refrescos"
    DIGESTIVOS = "digestivos"
    ESPUMOSOS = "espumosos"
    VINOS = "vinos"
    CERVEZAS = "cervezas"

    @classmethod
    def parse(cls, value: str) -> ProductCategory:
        """Normalise a raw category string, rejecting unknown values."""
        if not value or not value.strip():
            raise ValidationError("Product category cannot be empty")
        try:
            return cls(value.strip().lower())
        except ValueError:
            valid = ", ".join(c.value for c in cls)
            raise ValidationError(
                f"Invalid product category: {value}. Valid categories: {valid}"
            ) from None

    @property
    def is_liquor(self) -> bool:
        return self is ProductCategory.LICORES

    @property
    def is_beverage(self) -> bool:
        return self in (
            ProductCategory.BEBIDAS,
            ProductCategory.REFRESCOS,
            ProductCategory.CERVEZAS,
        )

    @property
    def is_food(self) -> bool:
        return self is ProductCategory.COMIDA

    @property
    def is_cocktail(self) -> bool:
        return self is ProductCategory.COCTELES


@dataclass(frozen=True, eq=False)
class Product:
    """A product in the catalog.

    Immutable once built; every field is mandatory except ingredients.
    Two products are the same product when their ids match.
    """

    id: str
    name: str
    category: ProductCategory
    price: Money
    ingredients: str = field(default="")

    def __post_init__(self) -> None:
        if not self.id or not self.id.strip():
            raise ValidationError("Product id cannot be empty")
        if not self.name or not self.name.strip():
            raise ValidationError("Product name cannot be empty")
        if len(self.name) > MAX_NAME_LENGTH:
            raise ValidationError(
                f"Product name cannot exceed {MAX_NAME_LENGTH} characters"
            )
        if not isinstance(self.category, ProductCategory):
            raise ValidationError(
                f"Product category must be a ProductCategory, got {self.category!r}"
            )
        if not isinstance(self.price, Money):
            raise ValidationError("Product price is required")

    def has_ingredient(self, ingredient: str) -> bool:
        return ingredient.lower() in self.ingredients.lower()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return f"{self.name} ({self.category.value}) - {self.price}"
