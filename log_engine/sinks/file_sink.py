"""File sink"""

import sys
from pathlib import Path
from typing import Optional, TextIO, Union

from log_engine.core.log_record import LogRecord
from log_engine.formatters.base_formatter import BaseFormatter
from log_engine.formatters.csv_formatter import CsvFormatter
from log_engine.sinks.base_sink import BaseSink


class FileSink(BaseSink):
    """
    Append records to a file, one comma-separated line each.

    If the file cannot be opened the failure is reported once to stderr
    and the sink stays inert for the rest of its life.
    """

    def __init__(
        self,
        filepath: Union[str, Path],
        formatter: Optional[BaseFormatter] = None,
        encoding: str = "utf-8"
    ):
        """
        Initialize file sink.

        Args:
            filepath: Path to log file (empty path gives an inert sink)
            formatter: Line formatter (default: CsvFormatter)
            encoding: File encoding (default: 'utf-8')
        """
        self.filepath = Path(filepath) if filepath else None
        self.formatter = formatter or CsvFormatter()
        self.encoding = encoding
        self._file: Optional[TextIO] = None
        if self.filepath is not None:
            self._open()

    def _open(self):
        """Open log file in append mode."""
        try:
            self.filepath.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(self.filepath, "a", encoding=self.encoding)
        except OSError as e:
            print(f"Error opening log file: {e}", file=sys.stderr)
            self._file = None

    @property
    def is_open(self) -> bool:
        """Whether the sink currently holds an open file."""
        return self._file is not None

    def emit(self, record: LogRecord) -> None:
        """Write log record to file."""
        if self._file:
            self._file.write(self.formatter.format(record) + "\n")
            self._file.flush()

    def flush(self) -> None:
        """Flush file buffer."""
        if self._file:
            self._file.flush()

    def close(self) -> None:
        """Close file."""
        if self._file:
            self._file.close()
            self._file = None

    def __repr__(self) -> str:
        """String representation."""
        return f"FileSink(filepath={str(self.filepath)!r}, open={self.is_open})"
