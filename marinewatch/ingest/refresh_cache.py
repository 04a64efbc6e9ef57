"""TTL memoization around a fetch+parse producer, with stale-on-error."""

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Generic, TypeVar

from marinewatch.models.common import utc_now

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class CacheEntry(Generic[T]):
    value: T
    captured_at: datetime
    ttl: timedelta

    def age(self, now: datetime) -> timedelta:
        return now - self.captured_at

    def is_fresh(self, now: datetime) -> bool:
        return self.age(now) < self.ttl


class RefreshCache(Generic[T]):
    """Serves the last produced value until ``ttl`` elapses.

    Refreshes are serialized: callers that arrive while a refresh is in
    flight wait for it and then get its result, so one expired window
    costs at most one producer call. A failed refresh falls back to the
    previous value when there is one.
    """

    def __init__(
        self,
        producer: Callable[[], T],
        ttl: timedelta,
        name: str = "cache",
        clock: Callable[[], datetime] = utc_now,
    ):
        self.producer = producer
        self.ttl = ttl
        self.name = name
        self.clock = clock
        self._entry: CacheEntry[T] | None = None
        self._lock = threading.Lock()

    @property
    def entry(self) -> CacheEntry[T] | None:
        return self._entry

    def get(self) -> T:
        with self._lock:
            now = self.clock()
            entry = self._entry
            if entry is not None and entry.is_fresh(now):
                logger.debug(
                    "%s: cache hit (age %.0fs)", self.name, entry.age(now).total_seconds()
                )
                return entry.value

            logger.info("%s: refreshing", self.name)
            try:
                value = self.producer()
            except Exception:
                if entry is None:
                    raise
                logger.exception(
                    "%s: refresh failed, serving value captured at %s",
                    self.name, entry.captured_at.isoformat(),
                )
                return entry.value

            self._entry = CacheEntry(value=value, captured_at=now, ttl=self.ttl)
            return value

    def invalidate(self) -> None:
        with self._lock:
            self._entry = None
