"""avrocache - cache-first schema resolution over a schema registry and local files."""

from __future__ import annotations

# Core
from avrocache.resolver import Resolver
from avrocache.schema import Schema, SchemaName

# Config
from avrocache.config import Config

# Storage
from avrocache.storage import (
    CacheStore,
    ErrorKind,
    FileStore,
    LocalFileStore,
    MemoryStore,
    RegistryClient,
    RegistryResult,
    RegistryStore,
)

# Errors
from avrocache.errors import (
    AvroCacheError,
    ConfigError,
    ConfigNotFoundError,
    ErrorCodes,
    InvalidIdentifierError,
    RegistryError,
    RegistryNotFoundError,
    SchemaNotFoundError,
    SchemaParseError,
    UnconfiguredRegistryError,
    UnknownSubjectError,
)

# Observability
from avrocache.observability import MetricsCollector

__version__ = "0.1.0"

__all__ = [
    # Core
    "Resolver",
    "Schema",
    "SchemaName",
    # Config
    "Config",
    # Storage
    "CacheStore",
    "RegistryStore",
    "FileStore",
    "ErrorKind",
    "RegistryResult",
    "MemoryStore",
    "RegistryClient",
    "LocalFileStore",
    # Errors
    "ErrorCodes",
    "AvroCacheError",
    "ConfigError",
    "ConfigNotFoundError",
    "InvalidIdentifierError",
    "SchemaNotFoundError",
    "SchemaParseError",
    "RegistryError",
    "UnconfiguredRegistryError",
    "UnknownSubjectError",
    "RegistryNotFoundError",
    # Observability
    "MetricsCollector",
]
