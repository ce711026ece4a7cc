"""Summary figures shown next to the record tables."""

from __future__ import annotations

from collections import Counter
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Sequence

from ..models import Customer, Order, RecordBase
from ..schemas import CustomerStats, OrderTotals, StatusBreakdown

CENT = Decimal("0.01")


def _money(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def order_totals(order: Order, tax_rate: Decimal, shipping_fee: Decimal) -> OrderTotals:
    """Derive the order total from its items; stored totals are never trusted."""
    subtotal = order.subtotal
    tax = subtotal * tax_rate
    return OrderTotals(
        subtotal=_money(subtotal),
        tax=_money(tax),
        shipping=_money(shipping_fee),
        total=_money(subtotal + tax + shipping_fee),
    )


def customer_stats(customers: Sequence[Customer]) -> CustomerStats:
    revenue = sum((customer.total_spent for customer in customers), Decimal(0))
    orders = sum(customer.total_orders for customer in customers)
    return CustomerStats(
        total=len(customers),
        active=sum(1 for customer in customers if customer.status == "active"),
        total_revenue=_money(revenue),
        avg_order_value=_money(revenue / orders) if orders else Decimal("0.00"),
    )


def status_breakdown(records: Iterable[RecordBase]) -> StatusBreakdown:
    counts = Counter(getattr(record, "status", None) or "unknown" for record in records)
    return StatusBreakdown(total_records=sum(counts.values()), by_status=dict(counts))
