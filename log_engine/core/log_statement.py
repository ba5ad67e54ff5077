"""
Call-site log statement

A statement decides at construction whether its severity passes the
engine's global level. Eligible statements collect message text and
enqueue exactly one record when finished; inert ones do nothing else.

Example:
    with engine.statement(SeverityLevel.ERROR, "RADIO") as log:
        log << "tx underrun on channel " << channel
"""

from __future__ import annotations
from datetime import datetime
from typing import TYPE_CHECKING, Any, List, Optional
import threading

from log_engine.core.log_record import LogRecord
from log_engine.core.severity import SeverityLevel

if TYPE_CHECKING:
    from log_engine.core.engine import LogEngine


class LogStatement:
    """Short-lived builder for one log record."""

    __slots__ = (
        "_engine", "_active", "_severity", "_component", "_source_file",
        "_source_line", "_thread_id", "_timestamp", "_parts",
    )

    def __init__(
        self,
        engine: "LogEngine",
        severity: SeverityLevel,
        component: str,
        source_file: str = "",
        source_line: int = 0,
        thread_id: Optional[int] = None
    ):
        self._active = SeverityLevel.OFF > severity >= engine.global_level
        if not self._active:
            return

        self._engine = engine
        self._severity = severity
        self._component = component
        self._source_file = source_file
        self._source_line = source_line
        self._thread_id = threading.get_ident() if thread_id is None else thread_id
        self._timestamp = datetime.now()
        self._parts: List[str] = []

    @property
    def active(self) -> bool:
        """True until the statement has enqueued its record or was filtered."""
        return self._active

    def write(self, *parts: Any) -> "LogStatement":
        """Append text to the message."""
        if self._active:
            self._parts.extend(str(part) for part in parts)
        return self

    def __lshift__(self, part: Any) -> "LogStatement":
        return self.write(part)

    def finish(self) -> bool:
        """
        Finalize the message and hand the record to the engine.

        Safe to call more than once; only the first call enqueues.

        Returns:
            True if a record was pushed by this call
        """
        if not self._active:
            return False
        self._active = False

        record = LogRecord(
            severity=self._severity,
            component=self._component,
            message="".join(self._parts),
            timestamp=self._timestamp,
            source_file=self._source_file,
            source_line=self._source_line,
            thread_id=self._thread_id,
        )
        return self._engine.push(record)

    def __enter__(self) -> "LogStatement":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.finish()
