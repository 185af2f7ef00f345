"""JSON-file-backed ProductCatalog over the legacy menu document.

The file maps legacy category names to lists of raw records, e.g.
``{"licores": [{"nombre": "Ron Bacardi", "precioCopa": "$90"}]}``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import structlog

from pos.domain.model.product import Product
from pos.domain.repository.product_catalog import ProductCatalog
from pos.infrastructure.legacy_menu import (
    LEGACY_CATEGORIES,
    canonical_category,
    product_from_legacy,
)

logger = structlog.get_logger(__name__)


class JsonProductCatalog(ProductCatalog):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductCatalog interface ---------------------------------------------

    def find_by_name(self, name: str) -> Product | None:
        wanted = name.strip().lower()
        for product in self._load():
            if product.name.lower() == wanted:
                return product
        return None

    def find_all(self) -> list[Product]:
        return self._load()

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> list[Product]:
        menu: dict[str, list[dict[str, Any]]] = json.loads(
            self._file_path.read_text(encoding="utf-8")
        )
        by_category: dict[str, list[tuple[str, dict[str, Any]]]] = {}
        for legacy_category, records in menu.items():
            key = canonical_category(legacy_category)
            by_category.setdefault(key, []).extend(
                (legacy_category, raw) for raw in records
            )

        products: list[Product] = []
        for key in LEGACY_CATEGORIES:
            for legacy_category, raw in by_category.get(key, []):
                products.append(product_from_legacy(raw, legacy_category))

        skipped = set(by_category) - set(LEGACY_CATEGORIES)
        if skipped:
            logger.debug("catalog.categories_skipped", categories=sorted(skipped))
        return products

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("{}", encoding="utf-8")
