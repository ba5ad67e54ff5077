"""
Console formatter with optional segments

Produces lines such as::

    [2024-Mar-05 14:02:11.123456] [0x7f3a] [radio.py:42] [ERROR] [RADIO] tx underrun
"""

from dataclasses import dataclass

from log_engine.core.log_record import LogRecord, format_thread_id, format_timestamp
from log_engine.formatters.base_formatter import BaseFormatter


@dataclass
class ConsoleFormat:
    """
    Optional console segments.

    Severity and component are always printed.

    Attributes:
        show_color: Wrap the prefix in the severity's ANSI color
        show_time: Prefix the record timestamp
        show_thread: Prefix the producing thread id
        show_source: Prefix the source ``file:line``
    """

    show_color: bool = True
    show_time: bool = False
    show_thread: bool = False
    show_source: bool = False


class ConsoleFormatter(BaseFormatter):
    """Format records for a terminal."""

    def __init__(self, fmt: ConsoleFormat = None):
        """
        Initialize console formatter.

        Args:
            fmt: Segment toggles (default: color only)

        Example:
            # Everything enabled
            formatter = ConsoleFormatter(ConsoleFormat(
                show_time=True, show_thread=True, show_source=True
            ))
        """
        self.fmt = fmt or ConsoleFormat()

    def format(self, record: LogRecord) -> str:
        """
        Format log record for console output.

        Args:
            record: Log record to format

        Returns:
            Formatted line
        """
        parts = []

        if self.fmt.show_color:
            parts.append(record.severity.color_code)
        if self.fmt.show_time:
            parts.append(f"[{format_timestamp(record.timestamp)}] ")
        if self.fmt.show_thread:
            parts.append(f"[{format_thread_id(record.thread_id)}] ")
        if self.fmt.show_source:
            parts.append(f"[{record.location}] ")

        parts.append(f"[{record.severity}] ")
        parts.append(f"[{record.component}] ")

        if self.fmt.show_color:
            parts.append(record.severity.reset_code)

        parts.append(record.message)
        return "".join(parts)

    def __repr__(self) -> str:
        """String representation."""
        return f"ConsoleFormatter(fmt={self.fmt!r})"
