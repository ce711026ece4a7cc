from decimal import Decimal

import pytest
from pydantic import ValidationError

from admin_console.store import order_store, product_store

from conftest import BASE_TIME, make_product


def product_fields(**overrides):
    data = {
        "name": "Desk Lamp",
        "description": "LED desk lamp",
        "price": Decimal("34.50"),
        "stock": 12,
        "category": "Home Office",
        "sku": "DL-100",
    }
    data.update(overrides)
    return data


def test_create_assigns_id_and_timestamps(clock):
    store = product_store(clock=clock)
    first = store.create(**product_fields())
    second = store.create(**product_fields(sku="DL-101"))
    assert first.id != second.id
    assert first.created_at == first.updated_at
    assert second.created_at > first.created_at
    assert store.list() == [first, second]


def test_create_skips_ids_taken_by_seed_records(clock):
    store = product_store(clock=clock)
    store.load([make_product(1, "Seeded", "S-1"), make_product(2, "Seeded too", "S-2")])
    created = store.create(**product_fields())
    assert created.id == "3"


def test_order_ids_use_prefix(orders, clock):
    store = order_store(clock=clock)
    store.load(orders)
    created = store.create(
        customer_id="9",
        customer_name="New Buyer",
        customer_email="new@example.com",
        items=[],
    )
    assert created.id == "ORD-009"


def test_create_ignores_caller_supplied_identity(clock):
    store = product_store(clock=clock)
    record = store.create(**product_fields(), id="forced", created_at=BASE_TIME)
    assert record.id == "1"
    assert record.created_at != BASE_TIME


def test_update_keeps_identity_and_refreshes_updated_at(product_records):
    before = product_records.get("2")
    after = product_records.update("2", {"stock": 3, "id": "99", "created_at": None})
    assert after.id == "2"
    assert after.created_at == before.created_at
    assert after.updated_at > before.updated_at
    assert after.stock == 3
    assert product_records.get("2") == after
    assert "99" not in product_records


def test_update_missing_record_is_noop(product_records):
    snapshot = product_records.list()
    assert product_records.update("404", {"stock": 1}) is None
    assert product_records.list() == snapshot


def test_update_rejects_values_outside_the_model(order_records):
    with pytest.raises(ValidationError):
        order_records.update("ORD-001", {"status": "lost"})
    assert order_records.get("ORD-001").status == "paid"


def test_delete_is_idempotent(product_records):
    assert product_records.delete("1") is True
    assert product_records.delete("1") is False
    assert "1" not in product_records
    assert len(product_records) == 3


def test_load_skips_existing_ids(product_records, products):
    assert product_records.load(products) == 0
    assert len(product_records) == len(products)
