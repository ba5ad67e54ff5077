"""Sinks module - Log output backends"""

from log_engine.sinks.base_sink import BaseSink
from log_engine.sinks.console_sink import ConsoleSink
from log_engine.sinks.file_sink import FileSink

__all__ = ["BaseSink", "ConsoleSink", "FileSink"]
