"""Pydantic schemas for criteria, drafts and view models."""

import math
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Generic, List, Literal, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .models import ProductStatus

ALL_STATUSES = "all"
ELLIPSIS = "..."

ItemT = TypeVar("ItemT")


class FilterCriteria(BaseModel):
    model_config = ConfigDict(frozen=True)

    search: str = ""
    status: str = ALL_STATUSES

    @property
    def is_empty(self) -> bool:
        return not self.search and self.status == ALL_STATUSES


class PageWindow(BaseModel):
    """Page metadata; ``page`` is always inside ``[1, total_pages]`` (or 1)."""

    model_config = ConfigDict(frozen=True)

    page: int = Field(1, ge=1)
    page_size: int = Field(..., ge=1)
    total_items: int = Field(0, ge=0)

    @classmethod
    def clamped(cls, page: int, page_size: int, total_items: int) -> "PageWindow":
        total_pages = math.ceil(total_items / page_size)
        return cls(page=min(max(page, 1), max(total_pages, 1)), page_size=page_size, total_items=total_items)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_items / self.page_size)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def start_item(self) -> int:
        if not self.total_items:
            return 0
        return (self.page - 1) * self.page_size + 1

    @computed_field  # type: ignore[prop-decorator]
    @property
    def end_item(self) -> int:
        return min(self.page * self.page_size, self.total_items)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


class Page(BaseModel, Generic[ItemT]):
    items: List[ItemT]
    window: PageWindow


class PageView(Page[ItemT], Generic[ItemT]):
    pages: List[Union[int, str]]
    criteria: FilterCriteria


class ProductDraft(BaseModel):
    """Product form contents; every field may still be missing."""

    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Decimal] = None
    stock: Optional[int] = None
    category: Optional[str] = None
    sku: Optional[str] = None
    status: Optional[ProductStatus] = None
    image: Optional[str] = None

    def to_fields(self) -> Dict[str, Any]:
        data = self.model_dump(exclude_none=True)
        for key in ("name", "description", "category", "sku"):
            if key in data:
                data[key] = data[key].strip()
        return data


class StatusChange(BaseModel):
    status: str


class NotificationOut(BaseModel):
    id: str
    message: str
    severity: Literal["success", "error", "info", "warning"]
    lifetime_ms: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class OrderTotals(BaseModel):
    subtotal: Decimal
    tax: Decimal
    shipping: Decimal
    total: Decimal


class CustomerStats(BaseModel):
    total: int
    active: int
    total_revenue: Decimal
    avg_order_value: Decimal


class StatusBreakdown(BaseModel):
    total_records: int
    by_status: Dict[str, int]
