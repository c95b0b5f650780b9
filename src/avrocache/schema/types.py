"""Schema value types: the parsed schema name and the opaque schema value."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

__all__ = ["SchemaName", "Schema", "qualified_name"]


@dataclass(frozen=True)
class SchemaName:
    """A schema name with an optional pinned version, e.g. ``io.acme.Payment:5``."""

    name: str
    version: int | None = None

    @classmethod
    def parse(cls, value: str) -> SchemaName:
        """Split ``name`` or ``name:version`` into its parts.

        Never raises. A suffix that is not a positive integer leaves the
        version unset, and the name is everything before the last ``:``.
        """
        name, sep, suffix = value.rpartition(":")
        if not sep:
            return cls(name=value)
        if suffix.isdigit() and suffix.isascii() and int(suffix) > 0:
            return cls(name=name, version=int(suffix))
        return cls(name=name)

    def versioned(self, version: int | None) -> str:
        """Return the ``name:version`` key for the given version."""
        return f"{self.name}:{version}"

    def __str__(self) -> str:
        if self.version is None:
            return self.name
        return self.versioned(self.version)


@dataclass
class Schema:
    """A resolved schema as handed out by a backend.

    ``raw_schema`` holds the source definition. ``id`` and ``version`` are
    assigned by the registry and stay None for schemas read from files.
    """

    raw_schema: str
    id: int | None = None
    version: int | None = None
    full_name: str | None = None

    @property
    def definition(self) -> Any:
        """The decoded JSON definition."""
        return json.loads(self.raw_schema)


def qualified_name(definition: Any) -> str | None:
    """Return ``namespace.name`` of a decoded named schema, or None if it has no name."""
    if not isinstance(definition, dict):
        return None
    name = definition.get("name")
    if not isinstance(name, str) or not name:
        return None
    namespace = definition.get("namespace")
    if "." in name or not namespace:
        return name
    return f"{namespace}.{name}"
