"""
Core module for the logging engine

This module contains the fundamental classes:
- LogEngine: Queue, sink registry and worker thread
- EngineBuilder: Builder pattern for engine construction
- EngineConfig: Configuration management
- LogStatement: Call-site record builder
- LogRecord: Log record data structure
- SeverityLevel: Severity enumeration
- BoundedBuffer: Bounded producer/consumer FIFO
- SinkRegistry: Keyed sinks with thresholds
"""

from log_engine.core.severity import SeverityLevel, parse_level, try_parse_level
from log_engine.core.log_record import LogRecord
from log_engine.core.bounded_buffer import BoundedBuffer
from log_engine.core.sink_registry import SinkEntry, SinkRegistry
from log_engine.core.engine_config import EngineConfig
from log_engine.core.log_statement import LogStatement
from log_engine.core.engine import LogEngine, CONSOLE_SINK_KEY, FILE_SINK_KEY
from log_engine.core.engine_builder import EngineBuilder

__all__ = [
    "SeverityLevel",
    "parse_level",
    "try_parse_level",
    "LogRecord",
    "BoundedBuffer",
    "SinkEntry",
    "SinkRegistry",
    "EngineConfig",
    "LogStatement",
    "LogEngine",
    "EngineBuilder",
    "CONSOLE_SINK_KEY",
    "FILE_SINK_KEY",
]
