"""avrocache storage backends.

Provides the ports the Resolver composes and their default implementations.

Usage::

    from avrocache.storage import FileStore, MemoryStore, RegistryClient

    cache = MemoryStore(ttl=300)
    registry = RegistryClient(url="http://localhost:8081")
    files = LocalFileStore("./priv/schemas")
"""

from __future__ import annotations

from avrocache.storage.base import (
    CacheKey,
    CacheStore,
    ErrorKind,
    FileStore,
    RegistryResult,
    RegistryStore,
)
from avrocache.storage.file import LocalFileStore
from avrocache.storage.memory import MemoryStore
from avrocache.storage.registry import RegistryClient

__all__ = [
    "CacheKey",
    "CacheStore",
    "ErrorKind",
    "FileStore",
    "LocalFileStore",
    "MemoryStore",
    "RegistryClient",
    "RegistryResult",
    "RegistryStore",
]
