"""Exceptions raised by the record engine."""


class ConsoleError(Exception):
    """Base class for record engine errors."""


class RecordNotFoundError(ConsoleError, LookupError):
    def __init__(self, entity: str, record_id: str) -> None:
        super().__init__(f"{entity} {record_id} not found")
        self.entity = entity
        self.record_id = record_id


class InvalidStatusError(ConsoleError, ValueError):
    def __init__(self, status: str, allowed) -> None:
        super().__init__(f"status {status!r} is not one of {sorted(allowed)}")
        self.status = status
        self.allowed = frozenset(allowed)
