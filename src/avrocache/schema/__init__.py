"""avrocache schema value types.

Example usage::

    from avrocache.schema import Schema, SchemaName

    SchemaName.parse("io.acme.Payment:5")  # SchemaName(name='io.acme.Payment', version=5)
"""

from __future__ import annotations

from avrocache.schema.types import Schema, SchemaName, qualified_name

__all__ = ["Schema", "SchemaName", "qualified_name"]
