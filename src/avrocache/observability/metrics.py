"""Resolution metrics: outcome counters and duration totals, exportable as Prometheus text."""

from __future__ import annotations

import threading

__all__ = ["MetricsCollector"]

RESOLVE_TOTAL = "avrocache_resolve_total"
RESOLVE_ERRORS_TOTAL = "avrocache_resolve_errors_total"
RESOLVE_DURATION = "avrocache_resolve_duration_seconds"


class MetricsCollector:
    """Thread-safe tallies of what the Resolver did.

    Successful resolutions are counted per ``(kind, source)``, failures per
    ``(kind, error_code)``, and wall time is accumulated per ``kind`` as a
    Prometheus summary (``_sum`` and ``_count`` only).
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._resolves: dict[tuple[str, str], int] = {}
        self._errors: dict[tuple[str, str], int] = {}
        self._durations: dict[str, list[float]] = {}

    def increment_resolves(self, kind: str, source: str) -> None:
        with self._lock:
            self._resolves[(kind, source)] = self._resolves.get((kind, source), 0) + 1

    def increment_errors(self, kind: str, error_code: str) -> None:
        with self._lock:
            self._errors[(kind, error_code)] = self._errors.get((kind, error_code), 0) + 1

    def observe_duration(self, kind: str, duration_seconds: float) -> None:
        with self._lock:
            total = self._durations.setdefault(kind, [0.0, 0])
            total[0] += duration_seconds
            total[1] += 1

    def snapshot(self) -> dict:
        """Copy of the current tallies.

        ``resolves`` maps ``(kind, source)`` and ``errors`` maps
        ``(kind, error_code)`` to counts; ``durations`` maps ``kind`` to
        ``{"sum": seconds, "count": n}``.
        """
        with self._lock:
            return {
                "resolves": dict(self._resolves),
                "errors": dict(self._errors),
                "durations": {kind: {"sum": s, "count": int(n)} for kind, (s, n) in self._durations.items()},
            }

    def reset(self) -> None:
        with self._lock:
            self._resolves.clear()
            self._errors.clear()
            self._durations.clear()

    def export_prometheus(self) -> str:
        snap = self.snapshot()
        lines: list[str] = []

        if snap["resolves"]:
            lines += _header(RESOLVE_TOTAL, "Schema resolutions by source", "counter")
            for (kind, source), count in sorted(snap["resolves"].items()):
                lines.append(f'{RESOLVE_TOTAL}{{kind="{kind}",source="{source}"}} {count}')

        if snap["errors"]:
            lines += _header(RESOLVE_ERRORS_TOTAL, "Failed schema resolutions by error code", "counter")
            for (kind, code), count in sorted(snap["errors"].items()):
                lines.append(f'{RESOLVE_ERRORS_TOTAL}{{error_code="{_escape(code)}",kind="{kind}"}} {count}')

        if snap["durations"]:
            lines += _header(RESOLVE_DURATION, "Time spent resolving schemas", "summary")
            for kind, total in sorted(snap["durations"].items()):
                lines.append(f'{RESOLVE_DURATION}_sum{{kind="{kind}"}} {total["sum"]}')
                lines.append(f'{RESOLVE_DURATION}_count{{kind="{kind}"}} {total["count"]}')

        return "\n".join(lines) + "\n" if lines else ""


def _header(name: str, help_text: str, metric_type: str) -> list[str]:
    return [f"# HELP {name} {help_text}", f"# TYPE {name} {metric_type}"]


def _escape(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
