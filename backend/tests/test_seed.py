import json

from admin_console.config import Settings
from admin_console.console import build_console
from admin_console.seed import import_seed, load_seed
from admin_console.services.notifications import ManualScheduler
from admin_console.store import customer_store, order_store, product_store

SEED = {
    "orders": [
        {
            "id": "ORD-001",
            "customer_id": "1",
            "customer_name": "John Doe",
            "customer_email": "john.doe@example.com",
            "items": [
                {"id": "1", "product_id": "1", "product_name": "Smart Watch", "quantity": 1, "price": "299.99"}
            ],
            "status": "paid",
            "payment_method": "paypal",
            "shipping_address": "123 Main St",
            "created_at": "2024-01-15T10:00:00",
        }
    ],
    "products": [
        {
            "id": "1",
            "name": "Smart Watch",
            "description": "Watch",
            "price": "299.99",
            "stock": 23,
            "category": "Electronics",
            "sku": "SW-002",
            "created_at": "2024-01-02T00:00:00",
        }
    ],
    "customers": [
        {"id": "1", "name": "John Doe", "email": "john.doe@example.com", "created_at": "2023-06-01T00:00:00"}
    ],
}


def write_seed(tmp_path):
    path = tmp_path / "seed.json"
    path.write_text(json.dumps(SEED), encoding="utf-8")
    return path


def test_import_seed_skips_duplicates(tmp_path):
    data = load_seed(write_seed(tmp_path))
    orders, products, customers = order_store(), product_store(), customer_store()

    stats = import_seed(data, orders, products, customers)
    assert (stats.created, stats.skipped) == (3, 0)

    again = import_seed(data, orders, products, customers)
    assert (again.created, again.skipped) == (0, 3)
    assert orders.get("ORD-001").items[0].product_name == "Smart Watch"


def test_build_console_loads_configured_seed(tmp_path):
    console = build_console(Settings(seed_file=write_seed(tmp_path), page_size=3), ManualScheduler())
    assert console.orders.view().window.total_items == 1
    assert console.products.page_size == 3
    assert console.customers.stats().total == 1


def test_build_console_with_missing_seed_file(tmp_path):
    console = build_console(Settings(seed_file=tmp_path / "absent.json"), ManualScheduler())
    assert console.orders.view().window.total_items == 0


def test_build_console_passes_toast_settings():
    scheduler = ManualScheduler()
    console = build_console(Settings(seed_file=None, notification_lifetime_ms=500), scheduler)
    for page in (console.orders, console.products, console.customers):
        note = page.notifications.success("saved")
        assert note.lifetime_ms == 500
    assert scheduler.pending == 3
    scheduler.advance(500)
    assert console.products.notifications.visible() == []
