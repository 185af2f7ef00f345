"""Abstract Product Catalog.

Defined in the domain layer so the domain never depends on
infrastructure.  Concrete catalogs only need to answer ``find_by_name``
and ``find_all``; the secondary lookups are built on ``find_all``.
Every product returned is fully built; absence is ``None`` or an empty
list, never a partial product.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Iterable

from pos.domain.model.product import Product, ProductCategory


class ProductCatalog(ABC):

    @abstractmethod
    def find_by_name(self, name: str) -> Product | None:
        """Return the product whose name matches case-insensitively, or None."""

    @abstractmethod
    def find_all(self) -> list[Product]:
        """Return every product in the catalog."""

    # --- Secondary lookups ----------------------------------------------------

    def find_by_category(self, category: ProductCategory) -> list[Product]:
        return [p for p in self.find_all() if p.category is category]

    def find_by_categories(self, categories: Iterable[ProductCategory]) -> list[Product]:
        wanted = set(categories)
        return [p for p in self.find_all() if p.category in wanted]

    def search(self, query: str) -> list[Product]:
        """Products whose name or ingredients contain *query*."""
        term = query.lower()
        return [
            p
            for p in self.find_all()
            if term in p.name.lower() or term in p.ingredients.lower()
        ]

    def find_by_ingredients(self, ingredients: Iterable[str]) -> list[Product]:
        """Products containing at least one of *ingredients*."""
        wanted = [i for i in ingredients if i]
        return [
            p
            for p in self.find_all()
            if p.ingredients and any(p.has_ingredient(i) for i in wanted)
        ]

    def find_by_price_range(
        self, min_price: Decimal | int | str, max_price: Decimal | int | str
    ) -> list[Product]:
        low, high = Decimal(str(min_price)), Decimal(str(max_price))
        return [p for p in self.find_all() if low <= p.price.amount <= high]

    def exists(self, product_id: str) -> bool:
        return any(p.id == product_id for p in self.find_all())
