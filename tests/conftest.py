"""Shared test fixtures: recording fakes for the three resolver backends."""

from __future__ import annotations

import json
from typing import Any

import pytest

from avrocache.errors import SchemaNotFoundError
from avrocache.schema.types import Schema
from avrocache.storage.base import RegistryResult
from avrocache.storage.memory import MemoryStore

PAYMENT_RAW = json.dumps(
    {
        "type": "record",
        "name": "Payment",
        "namespace": "io.acme",
        "fields": [{"name": "id", "type": "string"}, {"name": "amount", "type": "double"}],
    }
)


class RecordingCache(MemoryStore):
    """MemoryStore that records every get/put."""

    def __init__(self) -> None:
        super().__init__()
        self.gets: list[Any] = []
        self.puts: list[tuple[Any, Schema]] = []

    def get(self, key: Any) -> Schema | None:
        self.gets.append(key)
        return super().get(key)

    def put(self, key: Any, schema: Schema) -> Schema:
        self.puts.append((key, schema))
        return super().put(key, schema)


class FakeRegistry:
    """Registry double answering from canned results and assigning versions on put."""

    def __init__(self) -> None:
        self.results: dict[Any, RegistryResult] = {}
        self.get_calls: list[Any] = []
        self.put_calls: list[tuple[str, str]] = []
        self.next_id = 100
        self.next_version = 1
        self.put_error: Exception | None = None

    def get(self, key: Any) -> RegistryResult:
        self.get_calls.append(key)
        if key not in self.results:
            raise AssertionError(f"No registry result queued for {key!r}")
        return self.results[key]

    def put(self, name: str, raw_schema: str) -> Schema:
        self.put_calls.append((name, raw_schema))
        if self.put_error is not None:
            raise self.put_error
        schema = Schema(raw_schema=raw_schema, id=self.next_id, version=self.next_version, full_name=name)
        self.next_id += 1
        self.next_version += 1
        return schema


class FakeFiles:
    """File store double backed by a dict."""

    def __init__(self) -> None:
        self.schemas: dict[str, Schema] = {}
        self.errors: dict[str, Exception] = {}
        self.calls: list[str] = []

    def get(self, name: str) -> Schema:
        self.calls.append(name)
        if name in self.errors:
            raise self.errors[name]
        if name not in self.schemas:
            raise SchemaNotFoundError(schema_name=name)
        return self.schemas[name]


@pytest.fixture
def cache() -> RecordingCache:
    return RecordingCache()


@pytest.fixture
def registry() -> FakeRegistry:
    return FakeRegistry()


@pytest.fixture
def files() -> FakeFiles:
    return FakeFiles()


@pytest.fixture
def payment_raw() -> str:
    return PAYMENT_RAW
