"""Generate mock console data (orders, products, customers) as JSON."""

import json
import random
from datetime import datetime, timedelta
from pathlib import Path

ORDER_STATUSES = ["pending", "paid", "cancelled", "shipped", "delivered"]
PAYMENT_METHODS = ["credit_card", "paypal", "bank_transfer", "cash"]
CATALOG = [
    ("Wireless Headphones", "Electronics", "WH", "199.99"),
    ("Smart Watch", "Electronics", "SW", "299.99"),
    ("Laptop Stand", "Accessories", "LS", "49.99"),
    ("USB-C Cable", "Accessories", "UC", "19.99"),
    ("Phone Case", "Accessories", "PC", "29.99"),
    ("Wireless Mouse", "Electronics", "WM", "39.99"),
    ("Mechanical Keyboard", "Electronics", "MK", "129.00"),
    ("Desk Lamp", "Home Office", "DL", "34.50"),
]
PEOPLE = [
    ("John Doe", "123 Main St, New York, NY 10001"),
    ("Jane Smith", "456 Oak Ave, Los Angeles, CA 90001"),
    ("Bob Johnson", "789 Pine Rd, Chicago, IL 60601"),
    ("Alice Williams", "321 Elm St, Houston, TX 77001"),
    ("Charlie Brown", "654 Maple Dr, Phoenix, AZ 85001"),
    ("Diana Prince", "987 Cedar Ln, Seattle, WA 98101"),
]

random.seed(42)
now = datetime(2024, 1, 31, 9, 0, 0)

products = []
for idx, (name, category, prefix, price) in enumerate(CATALOG, start=1):
    created = now - timedelta(days=60 - idx)
    products.append(
        {
            "id": str(idx),
            "name": name,
            "description": f"{name} ({category.lower()})",
            "price": price,
            "stock": random.choice([0, random.randint(5, 150)]),
            "category": category,
            "sku": f"{prefix}-{idx:03d}",
            "status": random.choices(["active", "inactive"], weights=[5, 1])[0],
            "created_at": created.isoformat(timespec="seconds"),
            "updated_at": created.isoformat(timespec="seconds"),
        }
    )

customers = []
for idx, (name, address) in enumerate(PEOPLE, start=1):
    customers.append(
        {
            "id": str(idx),
            "name": name,
            "email": name.lower().replace(" ", ".") + "@example.com",
            "phone": f"+1 555-{random.randint(100, 999)}-{random.randint(1000, 9999)}",
            "address": address,
            "total_orders": 0,
            "total_spent": "0.00",
            "status": random.choices(["active", "inactive"], weights=[4, 1])[0],
            "created_at": (now - timedelta(days=90 - idx)).isoformat(timespec="seconds"),
            "last_order_date": None,
        }
    )

orders = []
item_seq = 1
for idx in range(1, 31):
    customer = random.choice(customers)
    items = []
    for product in random.sample(products, k=random.randint(1, 3)):
        items.append(
            {
                "id": str(item_seq),
                "product_id": product["id"],
                "product_name": product["name"],
                "quantity": random.randint(1, 4),
                "price": product["price"],
            }
        )
        item_seq += 1
    created = now - timedelta(days=random.randint(0, 30), hours=random.randint(0, 20))
    orders.append(
        {
            "id": f"ORD-{idx:03d}",
            "customer_id": customer["id"],
            "customer_name": customer["name"],
            "customer_email": customer["email"],
            "items": items,
            "status": random.choices(ORDER_STATUSES, weights=[4, 4, 1, 3, 5])[0],
            "payment_method": random.choice(PAYMENT_METHODS),
            "shipping_address": customer["address"],
            "created_at": created.isoformat(timespec="seconds"),
        }
    )
    spent = sum(float(item["price"]) * item["quantity"] for item in items)
    customer["total_orders"] += 1
    customer["total_spent"] = f"{float(customer['total_spent']) + spent:.2f}"
    if not customer["last_order_date"] or customer["last_order_date"] < orders[-1]["created_at"]:
        customer["last_order_date"] = orders[-1]["created_at"]

path = Path("backend/data/seed.json")
path.parent.mkdir(parents=True, exist_ok=True)
with path.open("w", encoding="utf-8") as file:
    json.dump({"orders": orders, "products": products, "customers": customers}, file, indent=2)

print(f"Generated {len(orders)} orders, {len(products)} products, {len(customers)} customers -> {path}")
