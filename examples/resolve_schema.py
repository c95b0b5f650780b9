"""Resolve a schema by name or global ID using a YAML config file.

Usage::

    python examples/resolve_schema.py io.acme.Payment
    python examples/resolve_schema.py 42 --config avrocache.yaml
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from avrocache import Config, LocalFileStore, MemoryStore, MetricsCollector, RegistryClient, Resolver, Schema

DEFAULT_CONFIG = Path(__file__).resolve().parent / "avrocache.yaml"


def resolve(
    identifier: str,
    config_path: str | Path = DEFAULT_CONFIG,
    metrics: MetricsCollector | None = None,
) -> Schema:
    """Resolve ``identifier`` with backends built from the YAML config at ``config_path``."""
    config = Config.from_yaml(config_path)
    root = Path(config.get("schemas.root"))
    if not root.is_absolute():
        root = Path(config_path).resolve().parent / root
    resolver = Resolver(
        cache=MemoryStore(ttl=config.get("cache.ttl")),
        registry=RegistryClient.from_config(config),
        files=LocalFileStore(root),
        metrics=metrics,
    )
    return resolver.resolve(int(identifier) if identifier.isdigit() else identifier)


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("identifier", help="global ID or name[:version]")
    parser.add_argument("--config", default=str(DEFAULT_CONFIG))
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    metrics = MetricsCollector()
    schema = resolve(args.identifier, args.config, metrics)
    print(f"{schema.full_name} id={schema.id} version={schema.version}")
    print(schema.raw_schema)
    print(metrics.export_prometheus(), end="")


if __name__ == "__main__":
    main()
