"""Bounded in-memory TTL cache with FIFO eviction.

Each entry carries its own expiration deadline (milliseconds since epoch).
When a new key would overflow the capacity, the oldest inserted entry is
evicted. Expired entries are removed lazily, only when they are read.
"""

from __future__ import annotations

import logging
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Generic, Hashable, List, Optional, TypeVar

from core.errors import ValidationError

T = TypeVar("T")

DEFAULT_CAPACITY = 100
DEFAULT_TTL_MS = 60_000

logger = logging.getLogger(__name__)


def _now_ms() -> float:
    return time.time() * 1000.0


@dataclass(slots=True)
class CacheEntry(Generic[T]):
    value: T
    expires_at: float  # ms since epoch


class BoundedTTLCache(Generic[T]):
    """Key/value store with a fixed capacity and per-entry TTL.

    Eviction is strict FIFO by insertion order: reads never reorder entries,
    and overwriting an existing key keeps its original position.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY, *, default_ttl_ms: int = DEFAULT_TTL_MS) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise ValidationError(f"capacity must be a positive integer, got {capacity!r}")
        # NaN fails every comparison, so check the positive form
        if not default_ttl_ms >= 0:
            raise ValidationError(f"default_ttl_ms must be non-negative, got {default_ttl_ms!r}")

        self._capacity = capacity
        self._default_ttl_ms = default_ttl_ms
        self._store: "OrderedDict[Hashable, CacheEntry[T]]" = OrderedDict()
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def default_ttl_ms(self) -> int:
        return self._default_ttl_ms

    def put(self, key: Hashable, value: T, ttl_ms: Optional[float] = None) -> None:
        ttl = self._default_ttl_ms if ttl_ms is None else ttl_ms
        if not ttl >= 0:
            raise ValidationError(f"ttl_ms must be non-negative, got {ttl!r}")

        with self._lock:
            entry = CacheEntry(value=value, expires_at=_now_ms() + ttl)

            # Overwrite in place: keeps insertion position, never evicts
            if key in self._store:
                self._store[key] = entry
                return

            if len(self._store) >= self._capacity:
                evicted, _ = self._store.popitem(last=False)
                logger.debug("Evicted oldest cache key %r (capacity=%d)", evicted, self._capacity)

            self._store[key] = entry

    def get(self, key: Hashable, default: Any = None) -> Any:
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                return default

            if _now_ms() >= entry.expires_at:
                del self._store[key]
                logger.debug("Expired cache key %r on read", key)
                return default

            return entry.value

    def delete(self, key: Hashable) -> bool:
        with self._lock:
            return self._store.pop(key, None) is not None

    def clear(self) -> int:
        with self._lock:
            count = len(self._store)
            self._store.clear()
            return count

    def keys(self) -> List[Hashable]:
        # Raw snapshot: expired-but-unread entries are still listed
        with self._lock:
            return list(self._store.keys())

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def __contains__(self, key: object) -> bool:
        marker = object()
        return self.get(key, marker) is not marker
