"""Mapping from the legacy menu data to domain Products.

The legacy menu groups raw records by its own category names
(``pizzas``, ``alitas``, ``cafes``...) and stores prices as strings or
numbers, sometimes with a ``$`` prefix or a ``--`` placeholder.  This
module is the only place that knows those shapes.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from pos.domain.model.product import Product, ProductCategory
from pos.domain.model.value_objects import Money

# Search order used when looking a product up across the whole menu.
LEGACY_CATEGORIES = (
    "cocteles",
    "refrescos",
    "licores",
    "cervezas",
    "pizzas",
    "alitas",
    "sopas",
    "ensaladas",
    "carnes",
    "cafes",
    "postres",
)

LEGACY_CATEGORY_ALIASES = {
    "cocteleria": "cocteles",
    "cafe": "cafes",
}

_CATEGORY_MAP = {
    "cocteles": ProductCategory.COCTELES,
    "refrescos": ProductCategory.REFRESCOS,
    "licores": ProductCategory.LICORES,
    "cervezas": ProductCategory.CERVEZAS,
    "pizzas": ProductCategory.COMIDA,
    "alitas": ProductCategory.COMIDA,
    "sopas": ProductCategory.COMIDA,
    "ensaladas": ProductCategory.COMIDA,
    "carnes": ProductCategory.COMIDA,
    "cafes": ProductCategory.BEBIDAS,
    "postres": ProductCategory.COMIDA,
}

PRICE_PLACEHOLDER = "--"


def canonical_category(legacy_category: str) -> str:
    key = legacy_category.strip().lower()
    return LEGACY_CATEGORY_ALIASES.get(key, key)


def map_category(legacy_category: str) -> ProductCategory:
    """Domain category for a legacy one; anything unknown is food."""
    return _CATEGORY_MAP.get(canonical_category(legacy_category), ProductCategory.COMIDA)


def parse_price(raw: Any) -> Decimal:
    """Read ``"$90"``, ``"1,200.50"``, ``85`` or ``85.5``; unreadable is 0."""
    text = str(raw).replace("$", "").replace(",", "").strip()
    try:
        value = Decimal(text)
    except InvalidOperation:
        return Decimal("0")
    if not value.is_finite() or value < 0:
        return Decimal("0")
    return value


def extract_price(raw: dict[str, Any]) -> Money:
    """Price of a legacy record.

    Liquors carry a per-glass price (``precioCopa``) which wins when it is
    set; everything else uses ``precio``.
    """
    glass = raw.get("precioCopa")
    if glass not in (None, "", PRICE_PLACEHOLDER):
        return Money(parse_price(glass))
    price = raw.get("precio")
    if price not in (None, ""):
        return Money(parse_price(price))
    return Money.zero()


def normalize_ingredients(raw: Any) -> str:
    if not raw:
        return ""
    parts = raw if isinstance(raw, (list, tuple)) else str(raw).split(",")
    return ", ".join(str(part).strip() for part in parts if str(part).strip())


def product_from_legacy(raw: dict[str, Any], legacy_category: str) -> Product:
    """Convert one legacy menu record into a Product."""
    name = str(raw["nombre"]).strip()
    return Product(
        id=str(raw.get("id") or name),
        name=name,
        category=map_category(legacy_category),
        price=extract_price(raw),
        ingredients=normalize_ingredients(raw.get("ingredientes")),
    )
