"""In-memory record stores, one per entity type."""

from __future__ import annotations

import itertools
import logging
import threading
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Generic, Iterable, List, Mapping, Optional, Type, TypeVar

from .models import Customer, Order, Product, RecordBase

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=RecordBase)

# Fields a patch may never overwrite.
PROTECTED_FIELDS = frozenset({"id", "created_at", "updated_at"})


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RecordStore(Generic[RecordT]):
    """Canonical collection of one record type, kept in insertion order.

    Every write happens under a re-entrant lock so identifiers stay unique and
    ``updated_at`` stamps stay ordered when several threads share the store.
    """

    def __init__(
        self,
        model: Type[RecordT],
        id_prefix: str = "",
        id_width: int = 1,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self.model = model
        self.id_prefix = id_prefix
        self.id_width = id_width
        self._clock = clock
        self._records: Dict[str, RecordT] = {}
        self._counter = itertools.count(1)
        self._lock = threading.RLock()

    @property
    def entity(self) -> str:
        return self.model.__name__

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    def _next_id(self) -> str:
        while True:
            candidate = f"{self.id_prefix}{next(self._counter):0{self.id_width}d}"
            if candidate not in self._records:
                return candidate

    def list(self) -> List[RecordT]:
        with self._lock:
            return list(self._records.values())

    def get(self, record_id: str) -> Optional[RecordT]:
        return self._records.get(record_id)

    def load(self, records: Iterable[RecordT]) -> int:
        """Insert already-identified records (seed data); existing ids are skipped."""
        added = 0
        with self._lock:
            for record in records:
                if record.id in self._records:
                    continue
                self._records[record.id] = record
                added += 1
        return added

    def create(self, **fields: Any) -> RecordT:
        with self._lock:
            now = self._clock()
            data = {key: value for key, value in fields.items() if key not in PROTECTED_FIELDS}
            record = self.model.model_validate(
                {**data, "id": self._next_id(), "created_at": now, "updated_at": now}
            )
            self._records[record.id] = record
        logger.info("Created %s %s", self.entity, record.id)
        return record

    def update(self, record_id: str, patch: Mapping[str, Any]) -> Optional[RecordT]:
        """Merge ``patch`` into the record; unknown ids are a silent no-op."""
        with self._lock:
            current = self._records.get(record_id)
            if current is None:
                logger.debug("Skipped update of missing %s %s", self.entity, record_id)
                return None
            changes = {key: value for key, value in patch.items() if key not in PROTECTED_FIELDS}
            merged = {**current.model_dump(), **changes, "updated_at": self._clock()}
            record = self.model.model_validate(merged)
            self._records[record_id] = record
        logger.info("Updated %s %s (%s)", self.entity, record_id, ", ".join(sorted(changes)) or "no fields")
        return record

    def delete(self, record_id: str) -> bool:
        with self._lock:
            removed = self._records.pop(record_id, None)
        if removed is None:
            return False
        logger.info("Deleted %s %s", self.entity, record_id)
        return True


def order_store(**kwargs: Any) -> RecordStore[Order]:
    return RecordStore(Order, id_prefix="ORD-", id_width=3, **kwargs)


def product_store(**kwargs: Any) -> RecordStore[Product]:
    return RecordStore(Product, **kwargs)


def customer_store(**kwargs: Any) -> RecordStore[Customer]:
    return RecordStore(Customer, **kwargs)
