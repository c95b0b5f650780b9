"""avrocache observability package.

Re-exports the metrics collector::

    from avrocache.observability import MetricsCollector
"""

from avrocache.observability.metrics import MetricsCollector

__all__ = ["MetricsCollector"]
