"""Backend ports used by the Resolver and the tagged registry result."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable

from avrocache.errors import UnconfiguredRegistryError, UnknownSubjectError
from avrocache.schema.types import Schema

__all__ = [
    "CacheKey",
    "CacheStore",
    "ErrorKind",
    "FileStore",
    "RegistryResult",
    "RegistryStore",
]

CacheKey = int | str


class ErrorKind(str, Enum):
    """Outcome tag of a registry lookup."""

    OK = "ok"
    UNCONFIGURED_REGISTRY = "unconfigured_registry"
    UNKNOWN_SUBJECT = "unknown_subject"
    OTHER = "other"

    @classmethod
    def of(cls, error: BaseException) -> ErrorKind:
        """Classify an error raised or reported by a registry backend."""
        if isinstance(error, UnconfiguredRegistryError):
            return cls.UNCONFIGURED_REGISTRY
        if isinstance(error, UnknownSubjectError):
            return cls.UNKNOWN_SUBJECT
        return cls.OTHER


@dataclass(frozen=True)
class RegistryResult:
    """Either a schema or the error a registry lookup produced, tagged by kind."""

    kind: ErrorKind
    schema: Schema | None = None
    error: Exception | None = None

    @classmethod
    def ok(cls, schema: Schema) -> RegistryResult:
        return cls(kind=ErrorKind.OK, schema=schema)

    @classmethod
    def failure(cls, error: Exception) -> RegistryResult:
        return cls(kind=ErrorKind.of(error), error=error)

    def unwrap(self) -> Schema:
        """Return the schema, or raise the carried error as-is."""
        if self.error is not None:
            raise self.error
        if self.schema is None:
            raise ValueError("Registry result carries neither a schema nor an error")
        return self.schema


@runtime_checkable
class CacheStore(Protocol):
    """Fast key/value store for resolved schemas."""

    def get(self, key: CacheKey) -> Schema | None:
        """Return the cached schema, or None on a miss."""
        ...

    def put(self, key: CacheKey, schema: Schema) -> Schema:
        """Store the schema under ``key`` and return the stored value."""
        ...


@runtime_checkable
class RegistryStore(Protocol):
    """Remote authority that owns global IDs and subject versions."""

    def get(self, key: CacheKey) -> RegistryResult:
        """Look up a schema by global ID or by (optionally versioned) name."""
        ...

    def put(self, name: str, raw_schema: str) -> Schema:
        """Register ``raw_schema`` under ``name`` and return it with its assigned version."""
        ...


@runtime_checkable
class FileStore(Protocol):
    """Local schema definitions, read-only from the Resolver's side."""

    def get(self, name: str) -> Schema:
        """Return the schema stored for ``name``, raising if it cannot be read."""
        ...
