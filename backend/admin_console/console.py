"""Wiring of stores, notification queues and page controllers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .config import Settings
from .seed import import_seed, load_seed
from .services.controllers import CustomersController, OrdersController, ProductsController
from .services.notifications import NotificationQueue, Scheduler
from .store import customer_store, order_store, product_store

logger = logging.getLogger(__name__)


@dataclass
class Console:
    orders: OrdersController
    products: ProductsController
    customers: CustomersController


def build_console(settings: Settings, scheduler: Optional[Scheduler] = None) -> Console:
    """Create one store and one controller per entity, optionally seeded."""

    def queue() -> NotificationQueue:
        return NotificationQueue(scheduler, default_lifetime_ms=settings.notification_lifetime_ms)

    orders, products, customers = order_store(), product_store(), customer_store()
    if settings.seed_file:
        if settings.seed_file.exists():
            import_seed(load_seed(settings.seed_file), orders, products, customers)
        else:
            logger.warning("Seed file %s not found, starting empty", settings.seed_file)

    return Console(
        orders=OrdersController(
            orders,
            queue(),
            page_size=settings.page_size,
            tax_rate=settings.tax_rate,
            shipping_fee=settings.shipping_fee,
        ),
        products=ProductsController(products, queue(), page_size=settings.page_size),
        customers=CustomersController(customers, queue(), page_size=settings.page_size),
    )
