"""Tests for the example script in the examples/ directory."""

from __future__ import annotations

import importlib.util
import pathlib

import yaml

from avrocache.observability import MetricsCollector

PROJECT_ROOT = pathlib.Path(__file__).resolve().parent.parent.parent


def _load_example_module(relative_path: str):
    """Load a Python module from a path relative to PROJECT_ROOT using importlib."""
    full_path = PROJECT_ROOT / relative_path
    spec = importlib.util.spec_from_file_location(full_path.stem, str(full_path))
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod


class TestResolveSchemaExample:
    def test_resolves_from_bundled_schemas(self):
        mod = _load_example_module("examples/resolve_schema.py")
        metrics = MetricsCollector()

        schema = mod.resolve("io.acme.Payment", metrics=metrics)

        assert schema.full_name == "io.acme.Payment"
        assert schema.definition["fields"][0]["name"] == "id"
        assert 'source="file"' in metrics.export_prometheus()

    def test_config_has_no_registry(self):
        data = yaml.safe_load((PROJECT_ROOT / "examples" / "avrocache.yaml").read_text())
        assert data["registry"]["url"] is None
        assert (PROJECT_ROOT / "examples" / data["schemas"]["root"] / "io" / "acme" / "Payment.avsc").is_file()
