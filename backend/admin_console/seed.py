"""Load a JSON seed dataset into the in-memory stores."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List

from pydantic import BaseModel, Field

from .models import Customer, Order, Product
from .store import RecordStore

logger = logging.getLogger(__name__)


class SeedData(BaseModel):
    orders: List[Order] = Field(default_factory=list)
    products: List[Product] = Field(default_factory=list)
    customers: List[Customer] = Field(default_factory=list)


@dataclass
class ImportStats:
    created: int = 0
    skipped: int = 0

    def __iadd__(self, other: "ImportStats") -> "ImportStats":
        self.created += other.created
        self.skipped += other.skipped
        return self


def load_seed(path: Path) -> SeedData:
    with path.open(encoding="utf-8") as fh:
        return SeedData.model_validate(json.load(fh))


def import_records(store: RecordStore, records: Iterable) -> ImportStats:
    records = list(records)
    created = store.load(records)
    return ImportStats(created=created, skipped=len(records) - created)


def import_seed(
    data: SeedData,
    orders: RecordStore[Order],
    products: RecordStore[Product],
    customers: RecordStore[Customer],
) -> ImportStats:
    stats = ImportStats()
    stats += import_records(orders, data.orders)
    stats += import_records(products, data.products)
    stats += import_records(customers, data.customers)
    logger.info("Seed import: created %d records, skipped %d duplicates", stats.created, stats.skipped)
    return stats
