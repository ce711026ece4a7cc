"""Form rules evaluated against record drafts.

Each rule inspects one field of a draft and returns an error message or
``None``. ``validate`` collects the first failing message per field, so an
empty mapping means the draft can be submitted.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional, Sequence

from pydantic import BaseModel

from ..models import RecordBase


def _value(draft: BaseModel, field: str) -> Any:
    return getattr(draft, field, None)


def _number(value: Any) -> Optional[Decimal]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return None


@dataclass(frozen=True)
class Rule(ABC):
    field: str
    message: str

    @abstractmethod
    def check(self, draft: BaseModel, existing: Sequence[RecordBase], editing_id: Optional[str]) -> Optional[str]:
        """Return the error message for this field, or ``None``."""


@dataclass(frozen=True)
class Required(Rule):
    def check(self, draft, existing, editing_id):
        value = _value(draft, self.field)
        if value is None or not str(value).strip():
            return self.message
        return None


@dataclass(frozen=True)
class Positive(Rule):
    def check(self, draft, existing, editing_id):
        number = _number(_value(draft, self.field))
        if number is None or number <= 0:
            return self.message
        return None


@dataclass(frozen=True)
class NonNegative(Rule):
    def check(self, draft, existing, editing_id):
        number = _number(_value(draft, self.field))
        if number is None or number < 0:
            return self.message
        return None


@dataclass(frozen=True)
class Unique(Rule):
    """Natural-key uniqueness; the record being edited never collides with itself."""

    def check(self, draft, existing, editing_id):
        value = _value(draft, self.field)
        if value is None:
            return None
        key = str(value).strip()
        for record in existing:
            if record.id != editing_id and getattr(record, self.field, None) == key:
                return self.message
        return None


PRODUCT_RULES: tuple = (
    Required("name", "Product name is required"),
    Required("description", "Description is required"),
    Positive("price", "Price must be greater than 0"),
    NonNegative("stock", "Stock must be 0 or greater"),
    Required("category", "Category is required"),
    Required("sku", "SKU is required"),
    Unique("sku", "SKU already exists"),
)


def validate(
    draft: BaseModel,
    existing: Sequence[RecordBase],
    editing_id: Optional[str] = None,
    rules: Sequence[Rule] = PRODUCT_RULES,
) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    for rule in rules:
        if rule.field in errors:
            continue
        message = rule.check(draft, existing, editing_id)
        if message:
            errors[rule.field] = message
    return errors
