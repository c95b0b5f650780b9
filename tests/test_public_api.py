"""Tests for the avrocache public API surface.

Verifies that all expected names are importable from the top-level
``avrocache`` package and that ``__all__`` matches what is exported.
"""

import pytest

import avrocache


class TestPublicAPIImports:
    """Every public component must be importable from ``import avrocache``."""

    @pytest.mark.parametrize("name", avrocache.__all__)
    def test_name_is_exported(self, name):
        assert getattr(avrocache, name) is not None

    def test_resolver_importable(self):
        from avrocache import Resolver

        assert Resolver is not None

    def test_backends_importable(self):
        from avrocache import LocalFileStore, MemoryStore, RegistryClient

        assert {LocalFileStore, MemoryStore, RegistryClient}

    def test_registry_errors_importable(self):
        from avrocache import UnconfiguredRegistryError, UnknownSubjectError

        assert issubclass(UnknownSubjectError, avrocache.RegistryError)
        assert issubclass(UnconfiguredRegistryError, avrocache.RegistryError)


class TestPublicAPIAll:
    def test_all_has_no_duplicates(self):
        assert len(avrocache.__all__) == len(set(avrocache.__all__))

    def test_version(self):
        assert avrocache.__version__ == "0.1.0"
