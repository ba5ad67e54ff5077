"""
Sink registry with per-sink severity thresholds
"""

from __future__ import annotations
from dataclasses import dataclass
import threading
from typing import Callable, Dict, List, Optional

from log_engine.core.log_record import LogRecord
from log_engine.core.severity import SeverityLevel

RenderFn = Callable[[LogRecord], None]


@dataclass(frozen=True)
class SinkEntry:
    """
    A registered sink as seen by the dispatcher.

    Attributes:
        key: Unique sink name (e.g. "console", "file")
        render_fn: Callable that emits one record
        min_level: Lowest severity delivered to this sink
    """

    key: str
    render_fn: RenderFn
    min_level: SeverityLevel = SeverityLevel.TRACE

    def accepts(self, record: LogRecord) -> bool:
        """Check whether the record passes this sink's threshold."""
        return record.severity >= self.min_level


class SinkRegistry:
    """
    Keyed collection of sinks and their thresholds.

    Levels are stored separately from render functions, so a level may be
    assigned to a key before the sink itself is added. A key without a
    level receives every record.

    Thread Safety:
        All methods are thread-safe. Dispatch works on a snapshot so that
        render functions run without the lock held.

    Example:
        registry = SinkRegistry()
        registry.add("console", ConsoleSink())
        registry.set_level("console", SeverityLevel.WARNING)

        for entry in registry.snapshot():
            if entry.accepts(record):
                entry.render_fn(record)
    """

    def __init__(self):
        """Initialize sink registry."""
        self._sinks: Dict[str, RenderFn] = {}
        self._levels: Dict[str, SeverityLevel] = {}
        self._lock = threading.RLock()

    def add(
        self,
        key: str,
        render_fn: RenderFn,
        level: Optional[SeverityLevel] = None
    ) -> Optional[RenderFn]:
        """
        Register a sink, replacing any sink under the same key.

        Args:
            key: Unique sink name
            render_fn: Callable taking a LogRecord
            level: Optional threshold for this sink

        Returns:
            The replaced render function, or None

        Raises:
            TypeError: If render_fn is not callable
        """
        if not callable(render_fn):
            raise TypeError("render_fn must be callable")

        with self._lock:
            previous = self._sinks.get(key)
            self._sinks[key] = render_fn
            if level is not None:
                self._levels[key] = level
            return previous

    def remove(self, key: str) -> Optional[RenderFn]:
        """
        Unregister a sink by key.

        The key's level is kept so a later add() reuses it.

        Returns:
            The removed render function, or None if not registered
        """
        with self._lock:
            return self._sinks.pop(key, None)

    def get(self, key: str) -> Optional[RenderFn]:
        """Get a registered render function by key."""
        with self._lock:
            return self._sinks.get(key)

    def set_level(self, key: str, level: SeverityLevel) -> None:
        """Set the threshold for a key (registered or not)."""
        with self._lock:
            self._levels[key] = level

    def get_level(self, key: str) -> SeverityLevel:
        """Get the threshold for a key; TRACE when none was set."""
        with self._lock:
            return self._levels.get(key, SeverityLevel.TRACE)

    def keys(self) -> List[str]:
        """Registered sink keys in registration order."""
        with self._lock:
            return list(self._sinks.keys())

    def snapshot(self) -> List[SinkEntry]:
        """
        Get the current sinks with their thresholds.

        Returns:
            List of SinkEntry in registration order
        """
        with self._lock:
            return [
                SinkEntry(key, fn, self._levels.get(key, SeverityLevel.TRACE))
                for key, fn in self._sinks.items()
            ]

    def __len__(self) -> int:
        with self._lock:
            return len(self._sinks)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._sinks

    def __repr__(self) -> str:
        """String representation."""
        with self._lock:
            return f"SinkRegistry(sinks={list(self._sinks.keys())})"
