"""Free-text and status filtering over record collections."""

from typing import Callable, Dict, Iterable, List, Sequence, Tuple, Type, TypeVar

from ..models import Customer, Order, Product, RecordBase
from ..schemas import ALL_STATUSES, FilterCriteria

RecordT = TypeVar("RecordT", bound=RecordBase)

SEARCH_FIELDS: Dict[Type[RecordBase], Tuple[str, ...]] = {
    Order: ("id", "customer_name", "customer_email"),
    Product: ("name", "sku", "category"),
    Customer: ("name", "email"),
}


def search_fields_for(model: Type[RecordBase]) -> Tuple[str, ...]:
    return SEARCH_FIELDS[model]


def make_predicate(criteria: FilterCriteria, fields: Iterable[str]) -> Callable[[RecordBase], bool]:
    needle = criteria.search.lower()
    fields = tuple(fields)

    def matches(record: RecordBase) -> bool:
        if needle and not any(needle in str(getattr(record, name, "") or "").lower() for name in fields):
            return False
        return criteria.status == ALL_STATUSES or getattr(record, "status", None) == criteria.status

    return matches


def filter_records(
    records: Sequence[RecordT],
    criteria: FilterCriteria,
    fields: Iterable[str],
) -> List[RecordT]:
    """Return the records matching ``criteria`` in their original order."""
    if criteria.is_empty:
        return list(records)
    matches = make_predicate(criteria, fields)
    return [record for record in records if matches(record)]
