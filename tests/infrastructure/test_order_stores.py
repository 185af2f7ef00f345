"""Contract tests run against both OrderStore implementations."""

from pathlib import Path

import pytest

from pos.domain.model.order import OrderStatus
from pos.domain.model.order_item import Customization, CustomizationKind, OrderItem
from pos.domain.model.product import ProductCategory
from pos.domain.model.value_objects import Money
from pos.infrastructure.persistence.in_memory_order_store import InMemoryOrderStore
from pos.infrastructure.persistence.json_order_store import JsonOrderStore
from tests.fakes import make_product


@pytest.fixture(params=["memory", "json"])
def store(request, tmp_path: Path):
    if request.param == "memory":
        return InMemoryOrderStore()
    return JsonOrderStore(tmp_path / "orders.json")


def _rum_item() -> OrderItem:
    return OrderItem(
        product=make_product("Ron Bacardi Blanco", price="90", product_id="lic-1"),
        quantity=2,
        customizations=(
            Customization.drink("Coca Cola"),
            Customization.special_request("sin hielo"),
            Customization(CustomizationKind.DRINK, "Hielos", "1", Money.of("5")),
        ),
    )


class TestCurrentOrderSlot:

    def test_empty_store_has_no_current_order(self, store):
        assert store.get_current_order() is None

    def test_create_order_becomes_current(self, store):
        order = store.create_order("table-2")
        current = store.get_current_order()
        assert current == order
        assert current.customer_id == "table-2"
        assert current.status == OrderStatus.DRAFT

    def test_clear_current_keeps_the_order(self, store):
        order = store.create_order()
        store.clear_current_order()
        assert store.get_current_order() is None
        assert store.find_by_id(order.id) == order

    def test_new_order_replaces_current(self, store):
        first = store.create_order()
        second = store.create_order()
        assert store.get_current_order() == second
        assert {o.id for o in store.find_all()} == {first.id, second.id}


class TestSaveAndFind:

    def test_saved_items_read_back(self, store):
        order = store.create_order()
        item = order.add_item(_rum_item())
        store.save(order)

        loaded = store.find_by_id(order.id)
        assert loaded.total == Money.of("190")
        restored = loaded.find_item(item.id)
        assert restored.quantity == 2
        assert restored.unit_price == Money.of("90")
        assert restored.product.category is ProductCategory.LICORES
        assert [c.match_key for c in restored.customizations] == [
            c.match_key for c in item.customizations
        ]
        assert restored.customizations[2].additional_cost == Money.of("5")

    def test_save_upserts(self, store):
        order = store.create_order()
        order.add_item(_rum_item())
        store.save(order)
        order.clear()
        store.save(order)

        assert len(store.find_all()) == 1
        assert store.find_by_id(order.id).is_empty

    def test_status_is_persisted(self, store):
        order = store.create_order()
        order.add_item(_rum_item())
        order.complete()
        store.save(order)
        assert store.find_by_id(order.id).status == OrderStatus.COMPLETED

    def test_find_missing(self, store):
        assert store.find_by_id("order_missing") is None


class TestDelete:

    def test_delete_current_order_frees_slot(self, store):
        order = store.create_order()
        assert store.delete(order.id) is True
        assert store.get_current_order() is None
        assert store.find_by_id(order.id) is None

    def test_delete_missing(self, store):
        assert store.delete("order_missing") is False


class TestJsonOrderStoreFile:

    def test_survives_reopening(self, tmp_path):
        path = tmp_path / "orders.json"
        first = JsonOrderStore(path)
        order = first.create_order()
        order.add_item(_rum_item())
        first.save(order)

        reopened = JsonOrderStore(path).get_current_order()
        assert reopened == order
        assert reopened.total == order.total
        assert reopened.created_at == order.created_at

    def test_creates_missing_file(self, tmp_path):
        path = tmp_path / "data" / "orders.json"
        JsonOrderStore(path)
        assert path.exists()
