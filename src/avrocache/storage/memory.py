"""Thread-safe in-memory schema cache."""

from __future__ import annotations

import threading
import time
from typing import Callable

from avrocache.schema.types import Schema
from avrocache.storage.base import CacheKey

__all__ = ["MemoryStore"]


class MemoryStore:
    """In-process cache keyed by global ID, bare name or ``name:version``.

    Entries older than ``ttl`` seconds read as misses and are dropped on
    access. With ``ttl=None`` entries live until deleted or cleared.
    """

    def __init__(self, ttl: float | None = None, clock: Callable[[], float] = time.monotonic) -> None:
        if ttl is not None and ttl <= 0:
            raise ValueError("ttl must be positive")
        self._ttl = ttl
        self._clock = clock
        self._entries: dict[CacheKey, tuple[Schema, float | None]] = {}
        self._lock = threading.RLock()

    def get(self, key: CacheKey) -> Schema | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            schema, expires_at = entry
            if expires_at is not None and self._clock() >= expires_at:
                del self._entries[key]
                return None
            return schema

    def put(self, key: CacheKey, schema: Schema) -> Schema:
        expires_at = None if self._ttl is None else self._clock() + self._ttl
        with self._lock:
            self._entries[key] = (schema, expires_at)
        return schema

    def delete(self, key: CacheKey) -> bool:
        """Remove ``key``. Returns True if it was present."""
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, (int, str)):
            return False
        return self.get(key) is not None

    def __len__(self) -> int:
        """Number of live entries. Expired entries are dropped on the way."""
        with self._lock:
            now = self._clock()
            expired = [
                key for key, (_, expires_at) in self._entries.items() if expires_at is not None and now >= expires_at
            ]
            for key in expired:
                del self._entries[key]
            return len(self._entries)
