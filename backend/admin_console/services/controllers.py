"""Per-page orchestration: filter, paginate, mutate, export, notify."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Dict, FrozenSet, Generic, List, Optional, Tuple, TypeVar

from ..exceptions import InvalidStatusError, RecordNotFoundError
from ..models import CUSTOMER_STATUSES, ORDER_STATUSES, PRODUCT_STATUSES, Customer, Order, Product, RecordBase
from ..schemas import ALL_STATUSES, CustomerStats, FilterCriteria, OrderTotals, PageView, ProductDraft
from ..store import RecordStore
from . import export
from .analytics import customer_stats, order_totals
from .filtering import filter_records, search_fields_for
from .notifications import NotificationQueue
from .pagination import page_numbers, paginate
from .validation import PRODUCT_RULES, validate

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=RecordBase)

DEFAULT_PAGE_SIZE = 5


class PageController(ABC, Generic[RecordT]):
    """State and actions behind one record table.

    The controller owns its page state explicitly; ``view()`` recomputes the
    filtered, paginated rows from the store every time it is called.
    """

    label = "Records"
    export_name = "records"
    statuses: FrozenSet[str] = frozenset()

    def __init__(
        self,
        store: RecordStore[RecordT],
        notifications: Optional[NotificationQueue] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        self.store = store
        self.notifications = notifications if notifications is not None else NotificationQueue()
        self.criteria = FilterCriteria()
        self.page = 1
        self.page_size = page_size
        self.search_fields = search_fields_for(store.model)

    # -------------------- page state --------------------

    def set_search(self, text: str) -> None:
        self.criteria = self.criteria.model_copy(update={"search": text or ""})
        self.page = 1

    def set_status(self, status: str) -> None:
        status = status or ALL_STATUSES
        if status != ALL_STATUSES and status not in self.statuses:
            raise InvalidStatusError(status, self.statuses)
        self.criteria = self.criteria.model_copy(update={"status": status})
        self.page = 1

    def set_page_size(self, page_size: int) -> None:
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        self.page_size = page_size
        self.page = 1

    def set_page(self, page: int) -> None:
        self.page = page
        self.view()

    def apply(
        self,
        search: Optional[str] = None,
        status: Optional[str] = None,
        page_size: Optional[int] = None,
        page: Optional[int] = None,
    ) -> PageView[RecordT]:
        """Apply request parameters.

        A change of search, status or page size lands on page 1 and ``page``
        is ignored for that request.
        """
        reset = False
        if search is not None and search != self.criteria.search:
            self.set_search(search)
            reset = True
        if status is not None and status != self.criteria.status:
            self.set_status(status)
            reset = True
        if page_size is not None and page_size != self.page_size:
            self.set_page_size(page_size)
            reset = True
        if page is not None and not reset:
            self.page = page
        return self.view()

    # -------------------- views --------------------

    def filtered(self) -> List[RecordT]:
        return filter_records(self.store.list(), self.criteria, self.search_fields)

    def view(self) -> PageView[RecordT]:
        result = paginate(self.filtered(), self.page, self.page_size)
        self.page = result.window.page
        return PageView(
            items=result.items,
            window=result.window,
            pages=page_numbers(result.window.page, result.window.total_pages),
            criteria=self.criteria,
        )

    def get(self, record_id: str) -> RecordT:
        record = self.store.get(record_id)
        if record is None:
            raise RecordNotFoundError(self.store.entity, record_id)
        return record

    # -------------------- export --------------------

    @abstractmethod
    def export_rows(self, records: List[RecordT]) -> List[export.ExportRow]:
        """Project records into the columns of the exported file."""

    def export(self) -> Optional[export.ExportFile]:
        records = self.filtered()
        if not records:
            return None
        result = export.export_to_csv(self.export_rows(records), self.export_name)
        self.notifications.success(f"{self.label} exported successfully!")
        return result

    def leave(self) -> None:
        """Navigation away from the page drops its pending toasts."""
        self.notifications.clear()


class OrdersController(PageController[Order]):
    label = "Orders"
    export_name = "orders"
    statuses = ORDER_STATUSES

    def __init__(
        self,
        store: RecordStore[Order],
        notifications: Optional[NotificationQueue] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        tax_rate: Decimal = Decimal("0.10"),
        shipping_fee: Decimal = Decimal("10.00"),
    ) -> None:
        super().__init__(store, notifications, page_size)
        self.tax_rate = tax_rate
        self.shipping_fee = shipping_fee

    def export_rows(self, records):
        return export.order_rows(records, self.tax_rate, self.shipping_fee)

    def totals(self, order_id: str) -> OrderTotals:
        return order_totals(self.get(order_id), self.tax_rate, self.shipping_fee)

    def change_status(self, order_id: str, status: str) -> Optional[Order]:
        if status not in ORDER_STATUSES:
            self.notifications.error(f"Invalid status: {status}")
            return None
        if order_id not in self.store:
            self.notifications.error(f"Order {order_id} not found")
            return None
        order = self.store.update(order_id, {"status": status})
        self.notifications.success(f"Order {order_id} status updated to {status}")
        return order


class ProductsController(PageController[Product]):
    label = "Products"
    export_name = "products"
    statuses = PRODUCT_STATUSES

    def export_rows(self, records):
        return export.product_rows(records)

    def check(self, draft: ProductDraft, editing_id: Optional[str] = None) -> Dict[str, str]:
        return validate(draft, self.store.list(), editing_id, PRODUCT_RULES)

    def submit(self, draft: ProductDraft, editing_id: Optional[str] = None) -> Dict[str, str]:
        """Create (no ``editing_id``) or update a product; returns the field errors."""
        return self.save(draft, editing_id)[1]

    def save(self, draft: ProductDraft, editing_id: Optional[str] = None) -> Tuple[Optional[Product], Dict[str, str]]:
        if editing_id is not None and editing_id not in self.store:
            raise RecordNotFoundError(self.store.entity, editing_id)
        errors = self.check(draft, editing_id)
        if errors:
            logger.info("Rejected product form: %s", ", ".join(sorted(errors)))
            self.notifications.error("Please fix the form errors")
            return None, errors
        if editing_id is None:
            product = self.store.create(**{"status": "active", **draft.to_fields()})
            self.notifications.success("Product created successfully!")
        else:
            product = self.store.update(editing_id, draft.to_fields())
            self.notifications.success("Product updated successfully!")
        return product, {}

    def delete(self, product_id: str) -> bool:
        removed = self.store.delete(product_id)
        if removed:
            self.notifications.success("Product deleted successfully!")
        return removed


class CustomersController(PageController[Customer]):
    label = "Customers"
    export_name = "customers"
    statuses = CUSTOMER_STATUSES

    def export_rows(self, records):
        return export.customer_rows(records)

    def stats(self) -> CustomerStats:
        return customer_stats(self.store.list())
