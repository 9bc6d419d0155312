"""Telemetry - logging and metrics entry point

Log line format: [Component] message
Metric examples: events.processed, queue.depth, effect.apply.ok, query.fallback
"""

import logging
import os
import sys

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module (usually ``__name__``)."""
    return logging.getLogger(name)


def setup_logging(level: str, log_file: str | None) -> None:
    """Configure the root logger.

    The full-screen display owns stdout/stderr while a session runs, so log
    records go to *log_file*. Without a usable file, logging goes to stderr.

    Args:
        level: level name, e.g. "INFO" or "DEBUG"
        log_file: path of the log file, or None
    """
    handlers: list[logging.Handler] = []
    if log_file:
        try:
            os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)
            handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
        except OSError as e:
            print(f"hyprdisplay: cannot open log file {log_file}: {e}", file=sys.stderr)
    if not handlers:
        handlers.append(logging.StreamHandler())

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=_LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


def truncate_command(command: str, max_len: int) -> str:
    """Shorten a command string for log output."""
    if len(command) <= max_len:
        return command
    return command[: max_len - 3] + "..."


class Metrics:
    """Metrics facade

    Counters and gauges kept in memory; read back by tests and the debug log.
    """

    def __init__(self):
        self._counters: dict[str, int] = {}
        self._gauges: dict[str, float] = {}

    def inc(self, name: str, labels: dict[str, str] | None = None, value: int = 1) -> None:
        """Increment a counter.

        Args:
            name: metric name (e.g. "effect.apply.fail")
            labels: optional labels (e.g. {"key": "up"})
            value: increment, default 1
        """
        key = self._make_key(name, labels)
        self._counters[key] = self._counters.get(key, 0) + value

    def gauge(self, name: str, value: float, labels: dict[str, str] | None = None) -> None:
        """Set a gauge value."""
        key = self._make_key(name, labels)
        self._gauges[key] = value

    def get_counter(self, name: str, labels: dict[str, str] | None = None) -> int:
        key = self._make_key(name, labels)
        return self._counters.get(key, 0)

    def get_gauge(self, name: str, labels: dict[str, str] | None = None) -> float:
        key = self._make_key(name, labels)
        return self._gauges.get(key, 0.0)

    def reset(self) -> None:
        """Clear all metrics (tests)."""
        self._counters.clear()
        self._gauges.clear()

    def _make_key(self, name: str, labels: dict[str, str] | None) -> str:
        if not labels:
            return name
        label_str = ",".join(f"{k}={v}" for k, v in sorted(labels.items()))
        return f"{name}{{{label_str}}}"

    def get_all_counters(self) -> dict[str, int]:
        return dict(self._counters)

    def get_all_gauges(self) -> dict[str, float]:
        return dict(self._gauges)


metrics = Metrics()
