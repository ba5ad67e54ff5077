"""
Base formatter interface
"""

from abc import ABC, abstractmethod
from log_engine.core.log_record import LogRecord


class BaseFormatter(ABC):
    """
    Abstract base class for record formatters.

    Formatters turn LogRecord objects into a single line of text
    (without the trailing newline).
    """

    @abstractmethod
    def format(self, record: LogRecord) -> str:
        """
        Format a log record into a string.

        Args:
            record: The log record to format

        Returns:
            Formatted line
        """
        pass

    def __call__(self, record: LogRecord) -> str:
        """Allow formatters to be callable."""
        return self.format(record)
