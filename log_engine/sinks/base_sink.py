"""
Base sink interface
"""

from abc import ABC, abstractmethod
from log_engine.core.log_record import LogRecord


class BaseSink(ABC):
    """
    Abstract base class for sink backends.

    A sink is any callable taking a LogRecord; this base class adds the
    optional flush/close hooks the engine calls on flush and shutdown.
    Sinks are only ever invoked from the engine worker thread.
    """

    @abstractmethod
    def emit(self, record: LogRecord) -> None:
        """
        Render and write one record.

        Args:
            record: The log record to emit
        """
        pass

    def __call__(self, record: LogRecord) -> None:
        """Allow sinks to be registered directly as render functions."""
        self.emit(record)

    def flush(self) -> None:
        """Flush buffered output."""

    def close(self) -> None:
        """Release resources held by the sink."""

    def __enter__(self) -> "BaseSink":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()
