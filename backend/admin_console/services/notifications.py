"""Transient toast messages with auto-expiry.

A notification is visible from the moment it is pushed until it is dismissed,
either by the user or by its expiry timer. The timer handle lives on the
notification and is cancelled on manual dismissal, so a late timer can never
dismiss anything.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import threading
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Dict, List, Literal, Optional, Protocol

logger = logging.getLogger(__name__)

Severity = Literal["success", "error", "info", "warning"]
State = Literal["created", "visible", "dismissed"]

DEFAULT_LIFETIME_MS = 3000


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle: ...


class ThreadingScheduler:
    """Runs callbacks on daemon ``threading.Timer`` threads."""

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle:
        timer = threading.Timer(delay_ms / 1000, callback)
        timer.daemon = True
        timer.start()
        return timer


@dataclass
class ScheduledCall:
    due_ms: int
    callback: Callable[[], None]
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Virtual clock; callbacks fire only when ``advance`` passes their due time."""

    def __init__(self) -> None:
        self.now_ms = 0
        self._queue: List[tuple] = []
        self._seq = itertools.count()

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledCall:
        call = ScheduledCall(due_ms=self.now_ms + delay_ms, callback=callback)
        heapq.heappush(self._queue, (call.due_ms, next(self._seq), call))
        return call

    @property
    def pending(self) -> int:
        return sum(1 for _, _, call in self._queue if not call.cancelled)

    def advance(self, delta_ms: int) -> None:
        self.advance_to(self.now_ms + delta_ms)

    def advance_to(self, target_ms: int) -> None:
        while self._queue and self._queue[0][0] <= target_ms:
            due_ms, _, call = heapq.heappop(self._queue)
            self.now_ms = due_ms
            if not call.cancelled:
                call.callback()
        self.now_ms = max(self.now_ms, target_ms)


@dataclass
class Notification:
    message: str
    severity: Severity = "info"
    lifetime_ms: int = DEFAULT_LIFETIME_MS
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    state: State = "created"
    timer: Optional[TimerHandle] = field(default=None, repr=False, compare=False)


class NotificationQueue:
    def __init__(self, scheduler: Optional[Scheduler] = None, default_lifetime_ms: int = DEFAULT_LIFETIME_MS) -> None:
        self.scheduler = scheduler or ThreadingScheduler()
        self.default_lifetime_ms = default_lifetime_ms
        self._items: Dict[str, Notification] = {}
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._items)

    def push(self, message: str, severity: Severity = "info", lifetime_ms: Optional[int] = None) -> Notification:
        if lifetime_ms is None:
            lifetime_ms = self.default_lifetime_ms
        if lifetime_ms < 0:
            raise ValueError("lifetime_ms must be 0 or positive")
        notification = Notification(message=message, severity=severity, lifetime_ms=lifetime_ms)
        with self._lock:
            self._items[notification.id] = notification
            notification.state = "visible"
            if lifetime_ms:
                notification.timer = self.scheduler.call_later(lifetime_ms, lambda: self._expire(notification.id))
        return notification

    def success(self, message: str, lifetime_ms: Optional[int] = None) -> Notification:
        return self.push(message, "success", lifetime_ms)

    def error(self, message: str, lifetime_ms: Optional[int] = None) -> Notification:
        return self.push(message, "error", lifetime_ms)

    def info(self, message: str, lifetime_ms: Optional[int] = None) -> Notification:
        return self.push(message, "info", lifetime_ms)

    def warning(self, message: str, lifetime_ms: Optional[int] = None) -> Notification:
        return self.push(message, "warning", lifetime_ms)

    def visible(self) -> List[Notification]:
        with self._lock:
            return list(self._items.values())

    def dismiss(self, notification_id: str) -> bool:
        with self._lock:
            notification = self._items.pop(notification_id, None)
            if notification is None:
                return False
            if notification.timer is not None:
                notification.timer.cancel()
                notification.timer = None
            notification.state = "dismissed"
        return True

    def clear(self) -> None:
        with self._lock:
            for notification_id in list(self._items):
                self.dismiss(notification_id)

    def _expire(self, notification_id: str) -> None:
        with self._lock:
            notification = self._items.pop(notification_id, None)
            if notification is None:
                return
            notification.timer = None
            notification.state = "dismissed"
        logger.debug("Notification %s expired", notification_id)
