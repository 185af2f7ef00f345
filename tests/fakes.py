"""In-memory fakes and builders for testing.

The fake catalog implements the same abstract interface as the JSON
catalog but keeps everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

from pos.domain.model.product import Product, ProductCategory
from pos.domain.model.value_objects import Money
from pos.domain.repository.product_catalog import ProductCatalog


class FakeProductCatalog(ProductCatalog):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def find_by_name(self, name: str) -> Product | None:
        for p in self._store.values():
            if p.name.lower() == name.lower():
                return p
        return None

    def find_all(self) -> list[Product]:
        return list(self._store.values())

    def add(self, product: Product) -> None:
        self._store[product.id] = product


_counter = 0


def make_product(
    name: str = "Ron Bacardi Blanco",
    category: ProductCategory = ProductCategory.LICORES,
    price: str = "90.00",
    ingredients: str = "",
    product_id: str | None = None,
) -> Product:
    """Build a valid product; ids are unique unless given."""
    global _counter
    _counter += 1
    return Product(
        id=product_id or f"p{_counter}",
        name=name,
        category=category,
        price=Money.of(price),
        ingredients=ingredients,
    )


def sample_menu() -> list[Product]:
    return [
        make_product("Ron Bacardi Blanco", price="90", product_id="ron"),
        make_product("Tequila Jimador Reposado", price="85", product_id="tequila"),
        make_product("Vodka Absolut", price="95", product_id="vodka"),
        make_product("Whisky Red Label", price="110", product_id="whisky"),
        make_product("Jägermeister", price="100", product_id="jager"),
        make_product("Jägermeister 700ml", price="850", product_id="jager-700"),
        make_product("Botella Ron Bacardi", price="950", product_id="botella"),
        make_product("Licor Digestivo de Hierbas", price="80", product_id="digestivo"),
        make_product(
            "Pizza Hawaiana",
            category=ProductCategory.COMIDA,
            price="180",
            ingredients="jamón, piña, queso",
            product_id="pizza",
        ),
        make_product(
            "Arrachera",
            category=ProductCategory.COMIDA,
            price="260",
            ingredients="arrachera, cebolla",
            product_id="arrachera",
        ),
        make_product(
            "Coca Cola", category=ProductCategory.REFRESCOS, price="35", product_id="coca"
        ),
    ]
