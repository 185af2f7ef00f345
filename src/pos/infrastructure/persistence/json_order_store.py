"""JSON-file-backed implementation of OrderStore.

Keeps every order plus the id of the current one, so a register session
survives between CLI invocations.  Items embed a snapshot of their
product so an order reads back the same even if the menu changes.
"""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import Any

from pos.domain.model.order import Order, OrderStatus
from pos.domain.model.order_item import Customization, CustomizationKind, OrderItem
from pos.domain.model.product import Product, ProductCategory
from pos.domain.model.value_objects import Money
from pos.domain.repository.order_store import OrderStore


class JsonOrderStore(OrderStore):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- OrderStore interface -------------------------------------------------

    def get_current_order(self) -> Order | None:
        data = self._load_raw()
        current = data["current_order_id"]
        if current is None:
            return None
        return self.find_by_id(current)

    def create_order(self, customer_id: str | None = None) -> Order:
        order = Order.create(customer_id)
        self.save(order)
        data = self._load_raw()
        data["current_order_id"] = order.id
        self._persist_raw(data)
        return order

    def save(self, order: Order) -> Order:
        data = self._load_raw()
        orders = data["orders"]

        # Upsert: replace if exists, otherwise append
        for i, raw in enumerate(orders):
            if raw["id"] == order.id:
                orders[i] = self._to_raw(order)
                break
        else:
            orders.append(self._to_raw(order))

        self._persist_raw(data)
        return order

    def clear_current_order(self) -> None:
        data = self._load_raw()
        data["current_order_id"] = None
        self._persist_raw(data)

    def find_by_id(self, order_id: str) -> Order | None:
        for raw in self._load_raw()["orders"]:
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def find_all(self) -> list[Order]:
        return [self._to_domain(raw) for raw in self._load_raw()["orders"]]

    def delete(self, order_id: str) -> bool:
        data = self._load_raw()
        remaining = [raw for raw in data["orders"] if raw["id"] != order_id]
        if len(remaining) == len(data["orders"]):
            return False
        data["orders"] = remaining
        if data["current_order_id"] == order_id:
            data["current_order_id"] = None
        self._persist_raw(data)
        return True

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _money_to_raw(money: Money) -> dict[str, str]:
        return {"amount": str(money.amount), "currency": money.currency}

    @staticmethod
    def _money_to_domain(raw: dict[str, str]) -> Money:
        return Money(Decimal(raw["amount"]), raw["currency"])

    @classmethod
    def _to_raw(cls, order: Order) -> dict[str, Any]:
        return {
            "id": order.id,
            "customer_id": order.customer_id,
            "status": order.status.value,
            "created_at": order.created_at.isoformat(),
            "updated_at": order.updated_at.isoformat(),
            "items": [
                {
                    "id": item.id,
                    "quantity": item.quantity,
                    "unit_price": cls._money_to_raw(item.unit_price),
                    "product": {
                        "id": item.product.id,
                        "name": item.product.name,
                        "category": item.product.category.value,
                        "price": cls._money_to_raw(item.product.price),
                        "ingredients": item.product.ingredients,
                    },
                    "customizations": [
                        {
                            "kind": c.kind.value,
                            "name": c.name,
                            "value": c.value,
                            "additional_cost": (
                                cls._money_to_raw(c.additional_cost)
                                if c.additional_cost is not None
                                else None
                            ),
                        }
                        for c in item.customizations
                    ],
                }
                for item in order.items
            ],
        }

    @classmethod
    def _to_domain(cls, raw: dict[str, Any]) -> Order:
        items = []
        for i in raw["items"]:
            p = i["product"]
            product = Product(
                id=p["id"],
                name=p["name"],
                category=ProductCategory(p["category"]),
                price=cls._money_to_domain(p["price"]),
                ingredients=p.get("ingredients", ""),
            )
            customizations = [
                Customization(
                    kind=CustomizationKind(c["kind"]),
                    name=c["name"],
                    value=c["value"],
                    additional_cost=(
                        cls._money_to_domain(c["additional_cost"])
                        if c.get("additional_cost")
                        else None
                    ),
                )
                for c in i["customizations"]
            ]
            items.append(
                OrderItem(
                    product=product,
                    quantity=i["quantity"],
                    customizations=tuple(customizations),
                    unit_price=cls._money_to_domain(i["unit_price"]),
                    id=i["id"],
                )
            )
        return Order.restore(
            id=raw["id"],
            customer_id=raw.get("customer_id"),
            items=items,
            status=OrderStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict[str, Any]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, data: dict[str, Any]) -> None:
        self._file_path.write_text(
            json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._persist_raw({"current_order_id": None, "orders": []})
