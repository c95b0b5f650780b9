"""LocalFileStore: schema definitions read from ``*.avsc`` files on disk."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from avrocache.errors import SchemaNotFoundError, SchemaParseError
from avrocache.schema.types import Schema, qualified_name

__all__ = ["LocalFileStore"]

logger = logging.getLogger(__name__)

SCHEMA_SUFFIX = ".avsc"


class LocalFileStore:
    """Loads schemas from a directory tree where dots in a name map to folders.

    ``io.acme.Payment`` is read from ``<root>/io/acme/Payment.avsc``.
    """

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root).resolve()
        self._cache: dict[str, Schema] = {}

    @property
    def root(self) -> Path:
        return self._root

    def path_for(self, name: str) -> Path:
        """Return the file path a schema name maps to.

        Raises:
            SchemaNotFoundError: If the name has an empty segment or maps
                outside the root directory.
        """
        if "" in name.split("."):
            raise SchemaNotFoundError(schema_name=name)
        candidate = self._root / (name.replace(".", "/") + SCHEMA_SUFFIX)
        if not candidate.resolve().is_relative_to(self._root):
            raise SchemaNotFoundError(schema_name=name, path=str(candidate))
        return candidate

    def get(self, name: str) -> Schema:
        """Read the schema stored for ``name``.

        Raises:
            SchemaNotFoundError: If no file exists for the name, or the name
                does not map to a file under the root.
            SchemaParseError: If the file is not a UTF-8 encoded JSON object.
        """
        if name in self._cache:
            return self._cache[name]

        file_path = self.path_for(name)
        if not file_path.is_file():
            raise SchemaNotFoundError(schema_name=name, path=str(file_path))

        try:
            raw = file_path.read_text(encoding="utf-8")
            data = json.loads(raw)
        except ValueError as e:
            # covers UnicodeDecodeError and JSONDecodeError
            raise SchemaParseError(message=f"Invalid schema file for '{name}': {e}", cause=e) from e

        if not isinstance(data, dict):
            raise SchemaParseError(message=f"Schema file for '{name}' is not a JSON object")

        logger.debug("Loaded schema '%s' from %s", name, file_path)
        schema = Schema(raw_schema=raw, full_name=qualified_name(data) or name)
        self._cache[name] = schema
        return schema

    def clear_cache(self) -> None:
        """Forget schemas loaded so far."""
        self._cache.clear()
