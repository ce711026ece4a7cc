"""CSV export of filtered record views."""

from __future__ import annotations

import csv
import io
import logging
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional, Sequence

from ..models import Customer, Order, Product
from .analytics import order_totals

logger = logging.getLogger(__name__)

ExportRow = Dict[str, Any]

NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class ExportFile:
    filename: str
    content: str
    row_count: int

    media_type: str = "text/csv"


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


def to_csv(rows: Sequence[ExportRow]) -> str:
    """Render rows with the first row's keys as the header."""
    columns = list(rows[0].keys())
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerow(columns)
    for row in rows:
        writer.writerow([_cell(row.get(column)) for column in columns])
    return buffer.getvalue()


def export_to_csv(rows: Sequence[ExportRow], base_name: str, today: Optional[date] = None) -> Optional[ExportFile]:
    if not rows:
        logger.debug("Nothing to export for %s", base_name)
        return None
    stamp = (today or date.today()).isoformat()
    export = ExportFile(filename=f"{base_name}-{stamp}.csv", content=to_csv(rows), row_count=len(rows))
    logger.info("Exported %d rows to %s", export.row_count, export.filename)
    return export


def _day(value: Optional[datetime]) -> Optional[str]:
    return value.date().isoformat() if value else None


def order_rows(orders: Iterable[Order], tax_rate: Decimal, shipping_fee: Decimal) -> List[ExportRow]:
    return [
        {
            "Order ID": order.id,
            "Customer": order.customer_name,
            "Email": order.customer_email,
            "Date": _day(order.created_at),
            "Amount": order_totals(order, tax_rate, shipping_fee).total,
            "Status": order.status,
            "Payment Method": order.payment_method,
        }
        for order in orders
    ]


def product_rows(products: Iterable[Product]) -> List[ExportRow]:
    return [
        {
            "Name": product.name,
            "SKU": product.sku,
            "Category": product.category,
            "Price": product.price,
            "Stock": product.stock,
            "Status": product.status,
            "Created": _day(product.created_at),
        }
        for product in products
    ]


def customer_rows(customers: Iterable[Customer]) -> List[ExportRow]:
    return [
        {
            "Name": customer.name,
            "Email": customer.email,
            "Phone": customer.phone or NOT_AVAILABLE,
            "Address": customer.address or NOT_AVAILABLE,
            "Total Orders": customer.total_orders,
            "Total Spent": customer.total_spent,
            "Status": customer.status,
            "Member Since": _day(customer.created_at),
            "Last Order": _day(customer.last_order_date) or NOT_AVAILABLE,
        }
        for customer in customers
    ]
