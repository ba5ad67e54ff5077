"""
Formatters module

Turns log records into console and file lines.
"""

from log_engine.formatters.base_formatter import BaseFormatter
from log_engine.formatters.console_formatter import ConsoleFormat, ConsoleFormatter
from log_engine.formatters.csv_formatter import CsvFormatter, ParsedLine

__all__ = [
    "BaseFormatter",
    "ConsoleFormat",
    "ConsoleFormatter",
    "CsvFormatter",
    "ParsedLine",
]
