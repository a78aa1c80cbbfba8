"""In-memory keyed cache with a fixed time-to-live.

Two independent instances are used:
  - the observation client's raw-response cache (30 min)
  - the species repository's merged-result cache (15 min)

They expire on their own schedules and are only cleared together by an
explicit full reset. Nothing is persisted across restarts.

Keys are built with :func:`make_key`, a canonical serialization of an
endpoint name plus its full parameter set, so parameter order never
changes the key.
"""

from __future__ import annotations

import json
import threading
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any, Generic, TypeVar

T = TypeVar("T")

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


def make_key(endpoint: str, params: dict[str, Any] | None = None) -> str:
    """Canonical cache key for an endpoint and its parameters."""
    return json.dumps(
        {"endpoint": endpoint, "params": params or {}},
        sort_keys=True,
        separators=(",", ":"),
        default=str,
    )


@dataclass(frozen=True)
class CacheEntry(Generic[T]):
    """A cached payload and the moment it was captured."""

    data: T
    fetched_at: datetime


class TTLCache(Generic[T]):
    """Keyed store whose entries are valid while ``now - fetched_at < ttl``.

    Reads and writes are guarded by a lock: an abandoned provider fetch can
    still write here from a worker thread after its caller has moved on.
    """

    def __init__(self, ttl: timedelta, *, clock: Clock = utc_now) -> None:
        self.ttl = ttl
        self._clock = clock
        self._entries: dict[str, CacheEntry[T]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> T | None:
        """Return the cached payload, or None if missing or expired."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None or not self._is_fresh(entry):
                return None
            return entry.data

    def set(self, key: str, data: T) -> None:
        """Store a payload stamped with the current time."""
        with self._lock:
            self._entries[key] = CacheEntry(data=data, fetched_at=self._clock())

    def is_fresh(self, key: str) -> bool:
        """True if the key is present and has not expired."""
        with self._lock:
            entry = self._entries.get(key)
            return entry is not None and self._is_fresh(entry)

    def clear(self) -> None:
        """Drop every entry in this cache."""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _is_fresh(self, entry: CacheEntry[T]) -> bool:
        return self._clock() - entry.fetched_at < self.ttl
