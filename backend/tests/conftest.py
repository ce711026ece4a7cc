"""Pytest configuration and shared record fixtures."""

from __future__ import annotations

import sys
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from pathlib import Path

import pytest

BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from admin_console.models import Customer, Order, OrderItem, Product  # noqa: E402
from admin_console.services.notifications import ManualScheduler, NotificationQueue  # noqa: E402
from admin_console.store import customer_store, order_store, product_store  # noqa: E402

BASE_TIME = datetime(2024, 1, 1, 8, 0, tzinfo=timezone.utc)


class TickingClock:
    """Each call returns one second later than the previous one."""

    def __init__(self, start: datetime = BASE_TIME) -> None:
        self.current = start

    def __call__(self) -> datetime:
        self.current += timedelta(seconds=1)
        return self.current


def make_order(idx: int, name: str, status: str = "pending", **extra) -> Order:
    email = name.lower().replace(" ", ".") + "@example.com"
    data = {
        "id": f"ORD-{idx:03d}",
        "customer_id": str(idx),
        "customer_name": name,
        "customer_email": email,
        "items": [
            OrderItem(id=f"{idx}-1", product_id="1", product_name="Wireless Headphones", quantity=2, price=Decimal("199.99"))
        ],
        "status": status,
        "payment_method": "credit_card",
        "shipping_address": "123 Main St, New York, NY 10001",
        "created_at": BASE_TIME - timedelta(days=idx),
    }
    data.update(extra)
    return Order(**data)


def make_product(idx: int, name: str, sku: str, category: str = "Electronics", **extra) -> Product:
    data = {
        "id": str(idx),
        "name": name,
        "description": f"{name} description",
        "price": Decimal("19.99"),
        "stock": 10,
        "category": category,
        "sku": sku,
        "created_at": BASE_TIME,
        "updated_at": BASE_TIME,
    }
    data.update(extra)
    return Product(**data)


def make_customer(idx: int, name: str, status: str = "active", **extra) -> Customer:
    data = {
        "id": str(idx),
        "name": name,
        "email": name.lower().replace(" ", ".") + "@example.com",
        "total_orders": 2,
        "total_spent": Decimal("500.00"),
        "status": status,
        "created_at": BASE_TIME,
    }
    data.update(extra)
    return Customer(**data)


ORDER_NAMES = [
    ("John Doe", "paid"),
    ("Jane Smith", "pending"),
    ("Bob Johnson", "shipped"),
    ("Alice Williams", "cancelled"),
    ("John Doe", "delivered"),
    ("Jane Smith", "pending"),
    ("Bob Johnson", "paid"),
    ("Alice Williams", "pending"),
]


@pytest.fixture
def orders():
    return [make_order(idx, name, status) for idx, (name, status) in enumerate(ORDER_NAMES, start=1)]


@pytest.fixture
def products():
    return [
        make_product(1, "Wireless Headphones", "WH-001"),
        make_product(2, "Smart Watch", "SW-002"),
        make_product(3, "Laptop Stand", "LS-003", category="Accessories", status="inactive", stock=0),
        make_product(4, "USB-C Cable", "UC-004", category="Accessories"),
    ]


@pytest.fixture
def customers():
    return [
        make_customer(1, "John Doe", total_orders=5, total_spent=Decimal("1250.00")),
        make_customer(2, "Jane Smith", status="inactive", total_orders=3, total_spent=Decimal("890.00")),
        make_customer(3, "Bob Johnson", total_orders=0, total_spent=Decimal("0")),
    ]


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def queue(scheduler):
    return NotificationQueue(scheduler)


@pytest.fixture
def order_records(orders, clock):
    store = order_store(clock=clock)
    store.load(orders)
    return store


@pytest.fixture
def product_records(products, clock):
    store = product_store(clock=clock)
    store.load(products)
    return store


@pytest.fixture
def customer_records(customers, clock):
    store = customer_store(clock=clock)
    store.load(customers)
    return store
