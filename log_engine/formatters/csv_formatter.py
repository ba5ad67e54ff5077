"""
Comma-separated formatter for log files

Line layout (stable, parsed by external tooling)::

    time,0xThreadId,file:line,SEVERITY,component,message
"""

from dataclasses import dataclass
from datetime import datetime

from log_engine.core.log_record import (
    LogRecord,
    TIME_FORMAT,
    format_thread_id,
    format_timestamp,
)
from log_engine.core.severity import SeverityLevel
from log_engine.formatters.base_formatter import BaseFormatter


@dataclass(frozen=True)
class ParsedLine:
    """Fields recovered from one log file line."""

    timestamp: datetime
    thread_id: int
    file_name: str
    line: int
    severity: SeverityLevel
    component: str
    message: str


class CsvFormatter(BaseFormatter):
    """
    Format records as comma-separated lines.

    The message is the last field, so it may itself contain commas;
    the other fields must not.
    """

    FIELD_COUNT = 6

    def format(self, record: LogRecord) -> str:
        """
        Format log record as a file line.

        Args:
            record: Log record to format

        Returns:
            Comma-separated line
        """
        return ",".join((
            format_timestamp(record.timestamp),
            format_thread_id(record.thread_id),
            record.location,
            str(record.severity),
            record.component,
            record.message,
        ))

    @classmethod
    def parse(cls, line: str) -> ParsedLine:
        """
        Parse a line produced by format().

        Args:
            line: One line from a log file (trailing newline allowed)

        Returns:
            ParsedLine with the recovered fields

        Raises:
            ValueError: If the line is not in the expected layout
        """
        fields = line.rstrip("\r\n").split(",", cls.FIELD_COUNT - 1)
        if len(fields) != cls.FIELD_COUNT:
            raise ValueError(f"Expected {cls.FIELD_COUNT} fields: {line!r}")

        time_str, thread_str, location, severity, component, message = fields
        if not thread_str.startswith("0x"):
            raise ValueError(f"Invalid thread id: {thread_str!r}")
        file_name, sep, line_no = location.rpartition(":")
        if not sep:
            raise ValueError(f"Invalid source location: {location!r}")

        try:
            level = SeverityLevel[severity]
        except KeyError:
            raise ValueError(f"Invalid severity: {severity!r}") from None

        return ParsedLine(
            timestamp=datetime.strptime(time_str, TIME_FORMAT),
            thread_id=int(thread_str[2:], 16),
            file_name=file_name,
            line=int(line_no),
            severity=level,
            component=component,
            message=message,
        )

    def __repr__(self) -> str:
        """String representation."""
        return "CsvFormatter()"
