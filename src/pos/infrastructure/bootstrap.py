"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module receives its collaborators through its constructor.

Environment:
  POS_DATA_DIR    directory holding menu.json and orders.json
  POS_LOG_LEVEL   log level for the CLI (default WARNING)
  POS_LOG_FORMAT  "json" or "console" (default console)
"""

from __future__ import annotations

import os
from pathlib import Path

from pos.domain.service.drink_pairing import DrinkPairingEngine
from pos.infrastructure.logging_config import configure_logging
from pos.infrastructure.persistence.json_order_store import JsonOrderStore
from pos.infrastructure.persistence.json_product_catalog import JsonProductCatalog

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    configured = os.environ.get("POS_DATA_DIR")
    return Path(configured) if configured else _DEFAULT_DATA_DIR


def setup_logging() -> None:
    configure_logging(
        level=os.environ.get("POS_LOG_LEVEL", "WARNING"),
        fmt=os.environ.get("POS_LOG_FORMAT", "console"),
    )


def product_catalog() -> JsonProductCatalog:
    return JsonProductCatalog(data_dir() / "menu.json")


def order_store() -> JsonOrderStore:
    return JsonOrderStore(data_dir() / "orders.json")


def drink_pairing_engine() -> DrinkPairingEngine:
    return DrinkPairingEngine()
