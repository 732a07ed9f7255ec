"""Thread-safe LRU cache with optional expiry and append-only persistence."""

from __future__ import annotations

import logging
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from datetime import timedelta
from typing import Callable

from .persistence import Persistence

logger = logging.getLogger(__name__)


@dataclass
class _Entry:
    value: str
    expires_at: float | None


class Cache:
    """An LRU cache of string values.

    When more than ``max_size`` entries are held, the least recently used one
    is evicted. Writes are appended to ``persist`` when it is given.
    """

    def __init__(
        self,
        max_size: int,
        persist: Persistence | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.max_size = max_size
        self.persist = persist
        self._clock = clock
        self._items: OrderedDict[str, _Entry] = OrderedDict()
        self._lock = threading.Lock()

    def _expired(self, entry: _Entry, now: float) -> bool:
        return entry.expires_at is not None and now > entry.expires_at

    def _evict_oldest_if_full(self) -> None:
        if len(self._items) > self.max_size and self._items:
            self._items.popitem(last=False)

    def set(
        self,
        key: str,
        value: str,
        ttl: float | timedelta = 0,
        replaying: bool = False,
    ) -> None:
        """Store ``value`` under ``key``; a non-zero ``ttl`` (seconds) sets an expiry."""
        seconds = ttl.total_seconds() if isinstance(ttl, timedelta) else float(ttl)
        with self._lock:
            expires_at = self._clock() + seconds if seconds != 0 else None
            self._items[key] = _Entry(value, expires_at)
            self._items.move_to_end(key)
            self._evict_oldest_if_full()

            if self.persist is not None and not replaying:
                try:
                    self.persist.append(f"SET {key} {value}")
                except (OSError, ValueError) as exc:
                    logger.error("Failed to append to AOF file: %s", exc)

    def get(self, key: str) -> str | None:
        """Return the value for ``key``, or None if it is missing or expired."""
        with self._lock:
            entry = self._items.get(key)
            if entry is None:
                return None
            if self._expired(entry, self._clock()):
                del self._items[key]
                return None
            self._items.move_to_end(key)
            return entry.value

    def clean_expired_items(self) -> None:
        """Drop every expired entry, then evict the oldest one if over capacity."""
        with self._lock:
            now = self._clock()
            for key, entry in list(self._items.items()):
                if self._expired(entry, now):
                    del self._items[key]
                    logger.info("Removed expired item: %s", key)
            self._evict_oldest_if_full()

    def start_cleaning_server(
        self,
        stop_event: threading.Event | None = None,
        interval: float = 60.0,
    ) -> None:
        """Run :meth:`clean_expired_items` every ``interval`` seconds until ``stop_event`` is set."""
        stop = stop_event if stop_event is not None else threading.Event()
        while not stop.wait(interval):
            logger.info("Running cache cleanup")
            self.clean_expired_items()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            entry = self._items.get(key)  # type: ignore[arg-type]
            return entry is not None and not self._expired(entry, self._clock())