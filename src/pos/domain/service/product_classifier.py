"""Product classification rules used by drink pairing.

These are plain substring checks over a product's name and category,
applied in a fixed order.  Names are folded to upper case with accents
removed before matching, so "Jägermeister" and "JAGERMEISTER" classify
the same way.
"""

from __future__ import annotations

import unicodedata

from pos.domain.model.product import Product, ProductCategory

LIQUOR_TYPE_NONE = "NONE"
LIQUOR_TYPE_DEFAULT = "DEFAULT"

# Ordered: the first matching keyword decides the liquor type.
LIQUOR_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("RON", ("RON",)),
    ("TEQUILA", ("TEQUILA",)),
    ("BRANDY", ("BRANDY",)),
    ("WHISKY", ("WHISKY", "WHISKEY")),
    ("VODKA", ("VODKA",)),
    ("GINEBRA", ("GINEBRA", "GIN")),
    ("MEZCAL", ("MEZCAL",)),
    ("COGNAC", ("COGNAC",)),
    ("JAGERMEISTER", ("JAGERMEISTER",)),
)


def fold(text: str) -> str:
    """Upper-case *text* and strip combining accent marks."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).upper()


def _name_contains(product: Product, *needles: str) -> bool:
    name = fold(product.name)
    return any(needle in name for needle in needles)


def is_liquor(product: Product) -> bool:
    return product.category is ProductCategory.LICORES


def is_jagermeister(product: Product) -> bool:
    return _name_contains(product, "JAGERMEISTER")


def is_bottle(product: Product) -> bool:
    return _name_contains(product, "BOTELLA", "BOTTLE") or (
        is_jagermeister(product) and _name_contains(product, "700")
    )


def is_digestivo(product: Product) -> bool:
    return product.category is ProductCategory.DIGESTIVOS or _name_contains(
        product, "DIGESTIVO"
    )


def is_espumoso(product: Product) -> bool:
    return product.category is ProductCategory.ESPUMOSOS or _name_contains(
        product, "CHAMPAGNE", "PROSECCO"
    )


def requires_drink_selection(product: Product) -> bool:
    return is_liquor(product) and not is_digestivo(product) and not is_espumoso(product)


def liquor_type(product: Product) -> str:
    if not is_liquor(product):
        return LIQUOR_TYPE_NONE
    name = fold(product.name)
    for kind, keywords in LIQUOR_KEYWORDS:
        if any(keyword in name for keyword in keywords):
            return kind
    return LIQUOR_TYPE_DEFAULT
