"""
Log record data structure

Immutable value handed from a log statement to the engine worker.
"""

from dataclasses import dataclass, field
from datetime import datetime
import threading

from log_engine.core.severity import SeverityLevel

TIME_FORMAT = "%Y-%b-%d %H:%M:%S.%f"


def format_timestamp(timestamp: datetime) -> str:
    """Render a timestamp as used in console and file output."""
    return timestamp.strftime(TIME_FORMAT)


def format_thread_id(thread_id: int) -> str:
    """Render a thread id as a hex literal (``0x7f3a...``)."""
    return f"0x{thread_id:x}"


def path_to_filename(path: str) -> str:
    """Strip directories from a source path, accepting both separators."""
    for sep in ("/", "\\"):
        path = path.rsplit(sep, 1)[-1]
    return path


@dataclass(frozen=True)
class LogRecord:
    """
    A single log record.

    Contains everything captured at the call site plus the finalized
    message text. Records are never modified once built.
    """

    severity: SeverityLevel
    component: str
    message: str = ""
    timestamp: datetime = field(default_factory=datetime.now)
    source_file: str = ""
    source_line: int = 0
    thread_id: int = field(default_factory=threading.get_ident)

    def __post_init__(self):
        """Validate record after initialization."""
        if not isinstance(self.severity, SeverityLevel):
            raise TypeError("severity must be SeverityLevel enum")
        if not isinstance(self.message, str):
            object.__setattr__(self, "message", str(self.message))

    @property
    def file_name(self) -> str:
        """Source file name without directories."""
        return path_to_filename(self.source_file)

    @property
    def location(self) -> str:
        """Source location as ``file:line``."""
        return f"{self.file_name}:{self.source_line}"

    def __str__(self) -> str:
        """String representation."""
        return (
            f"[{format_timestamp(self.timestamp)}] "
            f"[{self.severity}] "
            f"[{self.component}] "
            f"{self.message}"
        )
