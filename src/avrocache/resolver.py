"""Resolver: cache-first schema lookup with registry and file fallbacks."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any, Callable

from avrocache.errors import AvroCacheError, InvalidIdentifierError
from avrocache.schema.types import Schema, SchemaName
from avrocache.storage.base import CacheStore, ErrorKind, FileStore, RegistryStore
from avrocache.storage.file import LocalFileStore
from avrocache.storage.memory import MemoryStore
from avrocache.storage.registry import RegistryClient

if TYPE_CHECKING:
    from avrocache.config import Config
    from avrocache.observability.metrics import MetricsCollector

__all__ = ["Resolver"]

logger = logging.getLogger(__name__)


class Resolver:
    """Resolves schemas by global ID or by name, keeping the cache populated.

    Lookups go to the cache first. On a miss an ID is fetched from the
    registry only. A name is fetched from the registry and falls back to
    the file store when the registry is not configured, or when the
    registry does not know the subject, in which case the local schema is
    registered before it is cached.

    The resolver keeps no state besides its backends and takes no locks,
    so it can be shared between threads as long as the backends can.
    """

    def __init__(
        self,
        cache: CacheStore,
        registry: RegistryStore,
        files: FileStore,
        metrics: MetricsCollector | None = None,
    ) -> None:
        self._cache = cache
        self._registry = registry
        self._files = files
        self._metrics = metrics

    @classmethod
    def from_config(cls, config: Config, metrics: MetricsCollector | None = None) -> Resolver:
        """Build a resolver over the default backends described by ``config``."""
        return cls(
            cache=MemoryStore(ttl=config.get("cache.ttl")),
            registry=RegistryClient.from_config(config),
            files=LocalFileStore(config.get("schemas.root")),
            metrics=metrics,
        )

    def resolve(self, identifier: int | str) -> Schema:
        """Resolve a schema by global ID (int) or by ``name[:version]`` (str).

        Raises:
            InvalidIdentifierError: If ``identifier`` is neither a non-negative int nor a str.
        """
        if isinstance(identifier, bool):
            raise InvalidIdentifierError(identifier)
        if isinstance(identifier, int):
            if identifier < 0:
                raise InvalidIdentifierError(identifier)
            return self.resolve_id(identifier)
        if isinstance(identifier, str):
            return self.resolve_name(identifier)
        raise InvalidIdentifierError(identifier)

    def resolve_id(self, schema_id: int) -> Schema:
        """Resolve a schema by its registry global ID.

        The result is cached under the same ID. Registry failures propagate
        as-is; the file store is never consulted since IDs only exist in the
        registry.
        """
        return self._observe("id", self._resolve_id, schema_id)

    def resolve_name(self, name: str) -> Schema:
        """Resolve a schema by name, optionally pinned as ``name:version``.

        The cache is read with ``name`` exactly as given, while writes go to
        the bare name and to ``name:version``. A pinned lookup such as
        ``"X:5"`` therefore hits only once ``"X:5"`` itself has been written.
        """
        return self._observe("name", self._resolve_name, name)

    def _resolve_id(self, schema_id: int) -> tuple[Schema, str]:
        cached = self._cache.get(schema_id)
        if cached is not None:
            logger.debug("Cache hit for schema id %d", schema_id)
            return cached, "cache"

        logger.debug("Cache miss for schema id %d, asking registry", schema_id)
        schema = self._registry.get(schema_id).unwrap()
        return self._cache.put(schema_id, schema), "registry"

    def _resolve_name(self, name: str) -> tuple[Schema, str]:
        parsed = SchemaName.parse(name)

        cached = self._cache.get(name)
        if cached is not None:
            logger.debug("Cache hit for schema '%s'", name)
            return cached, "cache"

        logger.debug("Cache miss for schema '%s', asking registry", name)
        result = self._registry.get(name)

        if result.kind is ErrorKind.OK:
            return self._store(parsed, name, result.unwrap()), "registry"

        if result.kind is ErrorKind.UNCONFIGURED_REGISTRY:
            logger.debug("Registry not configured, reading '%s' from files", parsed.name)
            schema = self._files.get(parsed.name)
            return self._cache.put(parsed.name, schema), "file"

        if result.kind is ErrorKind.UNKNOWN_SUBJECT:
            logger.debug("Registry does not know '%s', reading it from files", parsed.name)
            local = self._files.get(parsed.name)
            registered = self._registry.put(parsed.name, local.raw_schema)
            logger.info("Registered local schema '%s' as version %s", parsed.name, registered.version)
            return self._store(parsed, name, registered), "registered"

        # Any other registry failure reaches the caller unchanged.
        raise result.error  # type: ignore[misc]

    def _store(self, parsed: SchemaName, name: str, schema: Schema) -> Schema:
        stored = self._cache.put(parsed.name, schema)
        if parsed.version is not None:
            return self._cache.put(name, stored)
        if stored.version is None:
            logger.debug("Schema '%s' has no version, skipping versioned cache key", parsed.name)
            return stored
        return self._cache.put(parsed.versioned(stored.version), stored)

    def _observe(self, kind: str, fn: Callable[[Any], tuple[Schema, str]], arg: Any) -> Schema:
        if self._metrics is None:
            return fn(arg)[0]

        start = time.monotonic()
        try:
            schema, source = fn(arg)
        except Exception as e:
            code = e.code if isinstance(e, AvroCacheError) else type(e).__name__
            self._metrics.increment_errors(kind, code)
            raise
        finally:
            self._metrics.observe_duration(kind, time.monotonic() - start)
        self._metrics.increment_resolves(kind, source)
        return schema
