"""
In-memory TTL cache for market data.

Entries expire lazily: staleness is checked when a key is read, and
no background sweeper runs. The number of entries is bounded: a write
that would exceed the bound first drops expired entries, then the
oldest ones.
"""

import logging
import threading
import time
from collections.abc import Callable
from typing import Any

from app.domain.markets.ports import MarketCachePort

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 300.0
DEFAULT_MAX_ENTRIES = 1024


class TTLCache(MarketCachePort):
    """Thread-safe key/value cache with per-entry expiry."""

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        max_entries: int = DEFAULT_MAX_ENTRIES,
    ) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self._ttl = ttl_seconds
        self._max_entries = max_entries
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: dict[str, tuple[float, Any]] = {}

    def get(self, key: str) -> Any | None:
        """Return the cached value, or None if absent or expired."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            stored_at, value = entry
            if self._clock() - stored_at >= self._ttl:
                del self._entries[key]
                logger.debug("Cache entry expired: %s", key)
                return None
            return value

    def set(self, key: str, value: Any) -> None:
        """Store `value` under `key`, resetting its age."""
        with self._lock:
            now = self._clock()
            # Re-inserting keeps dict order equal to age order.
            self._entries.pop(key, None)
            if len(self._entries) >= self._max_entries:
                self._evict(now)
            self._entries[key] = (now, value)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _evict(self, now: float) -> None:
        expired = [
            key
            for key, (stored_at, _) in self._entries.items()
            if now - stored_at >= self._ttl
        ]
        for key in expired:
            del self._entries[key]
        while len(self._entries) >= self._max_entries:
            oldest = next(iter(self._entries))
            del self._entries[oldest]
            logger.debug("Cache full, evicted: %s", oldest)

    def get_or_load(self, key: str, loader: Callable[[], Any]) -> Any:
        """Return the cached value or load, store and return a fresh one."""
        value = self.get(key)
        if value is None:
            value = loader()
            self.set(key, value)
        return value
