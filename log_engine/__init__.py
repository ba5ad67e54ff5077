"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Python Log Engine - An in-process asynchronous logging engine

Severity-tagged records are queued from any thread and fanned out by a
single background worker to console, file or custom sinks, each with its
own minimum severity.
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from log_engine.core.engine import LogEngine, CONSOLE_SINK_KEY, FILE_SINK_KEY
from log_engine.core.engine_builder import EngineBuilder
from log_engine.core.engine_config import EngineConfig
from log_engine.core.log_record import LogRecord
from log_engine.core.log_statement import LogStatement
from log_engine.core.severity import SeverityLevel, parse_level

# Import submodules (not all classes by default)
from log_engine import formatters
from log_engine import sinks

__all__ = [
    "LogEngine",
    "EngineBuilder",
    "EngineConfig",
    "LogRecord",
    "LogStatement",
    "SeverityLevel",
    "parse_level",
    "CONSOLE_SINK_KEY",
    "FILE_SINK_KEY",
    "formatters",
    "sinks",
]
