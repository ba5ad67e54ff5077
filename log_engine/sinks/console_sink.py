"""Console sink with ANSI colors"""

import sys

from log_engine.core.log_record import LogRecord
from log_engine.formatters.console_formatter import ConsoleFormat, ConsoleFormatter
from log_engine.sinks.base_sink import BaseSink


class ConsoleSink(BaseSink):
    """Write records to the diagnostic stream."""

    def __init__(self, fmt: ConsoleFormat = None, stream=None):
        """
        Initialize console sink.

        Args:
            fmt: Optional segment toggles (default: color only)
            stream: Output stream (default: sys.stderr)
        """
        self.formatter = ConsoleFormatter(fmt)
        self.stream = stream or sys.stderr

    def emit(self, record: LogRecord) -> None:
        """Write log record to console."""
        self.stream.write(self.formatter.format(record) + "\n")
        self.stream.flush()

    def flush(self) -> None:
        """Flush stream."""
        self.stream.flush()

    def __repr__(self) -> str:
        """String representation."""
        return f"ConsoleSink(fmt={self.formatter.fmt!r})"
