"""
Logging engine - queue, sink registry and background worker

Producers on any thread build records through LogStatement and push them
into a bounded buffer. One worker thread drains the buffer and routes each
record to every sink whose threshold it meets.
"""

from __future__ import annotations
from typing import List, Optional
import atexit
import sys
import threading

from log_engine.core.bounded_buffer import BoundedBuffer
from log_engine.core.engine_config import EngineConfig
from log_engine.core.log_record import LogRecord
from log_engine.core.log_statement import LogStatement
from log_engine.core.severity import LevelLike, SeverityLevel, coerce_level
from log_engine.core.sink_registry import RenderFn, SinkRegistry
from log_engine.sinks.console_sink import ConsoleSink
from log_engine.sinks.file_sink import FileSink

CONSOLE_SINK_KEY = "console"
FILE_SINK_KEY = "file"

# Component tag for the engine's own diagnostics
ENGINE_COMPONENT = "LOG"


class LogEngine:
    """
    Asynchronous logging engine.

    Create one instance at the application's composition root and pass it
    to the code that logs. Shutting it down (explicitly, through the
    context manager, or at interpreter exit) drains every queued record
    before the sinks are closed.

    Example:
        with LogEngine(EngineConfig(global_level=SeverityLevel.DEBUG)) as engine:
            engine.info("RADIO", "tuned to 2.4 GHz")
            with engine.statement(SeverityLevel.WARNING, "RADIO") as log:
                log << "gain clipped at " << gain << " dB"
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self._config = config if config is not None else EngineConfig.from_env()
        self._global_level = self._config.global_level
        self._sinks = SinkRegistry()
        self._owned_sinks: List[object] = []
        self._queue: BoundedBuffer[LogRecord] = BoundedBuffer(
            self._config.queue_size, self._config.push_timeout
        )
        self._exit = threading.Event()
        self._stopped = False
        self._close_on_exit = False
        self._pending_pushes = 0
        self._metrics = {"logged": 0, "dropped": 0, "processed": 0, "sink_errors": 0}
        self._metrics_lock = threading.Lock()
        self._pushes_done = threading.Condition(self._metrics_lock)

        self._install_default_sinks()
        self._start_worker()
        atexit.register(self.shutdown)

        for error in self._config.errors:
            self.error(ENGINE_COMPONENT, error)

    def _install_default_sinks(self):
        """Register console and file sinks from configuration."""
        if self._config.console_enabled:
            sink = ConsoleSink(self._config.console_format)
            self._sinks.add(CONSOLE_SINK_KEY, sink, self._config.console_level)
            self._owned_sinks.append(sink)

        if self._config.file_path:
            sink = FileSink(self._config.file_path)
            self._sinks.add(FILE_SINK_KEY, sink, self._config.file_level)
            self._owned_sinks.append(sink)

    def _start_worker(self):
        """Start the consumer thread."""
        self._worker_thread = threading.Thread(
            target=self._pop_task,
            name=f"{self._config.name}-worker",
            daemon=True
        )
        self._worker_thread.start()

    def _pop_task(self):
        """Drain the buffer until shutdown, then empty it (worker thread)."""
        timeout = self._config.pop_timeout
        while not self._exit.is_set():
            ok, record = self._queue.pop_with_timed_wait(timeout)
            if ok:
                try:
                    self._dispatch(record)
                finally:
                    self._queue.task_done()

        # Exit procedure: clear the queue without blocking
        while True:
            ok, record = self._queue.pop_with_haste()
            if not ok:
                break
            try:
                self._dispatch(record)
            finally:
                self._queue.task_done()

        # shutdown() was called by a sink on this thread and could not join
        if self._close_on_exit:
            self._close_sinks()

    def _dispatch(self, record: LogRecord):
        """Send one record to every sink whose threshold it meets."""
        errors = 0
        for entry in self._sinks.snapshot():
            if not entry.accepts(record):
                continue
            try:
                entry.render_fn(record)
            except Exception as e:
                errors += 1
                print(f"Sink '{entry.key}' error: {e}", file=sys.stderr)

        with self._metrics_lock:
            self._metrics["sink_errors"] += errors
            self._metrics["processed"] += 1

    def push(self, record: LogRecord) -> bool:
        """
        Enqueue a finished record.

        Never blocks longer than the configured push timeout. Records
        refused by a saturated buffer, or pushed after shutdown, are
        dropped and counted.

        Returns:
            True if the record was queued
        """
        with self._metrics_lock:
            if self._stopped:
                self._metrics["dropped"] += 1
                return False
            self._pending_pushes += 1

        queued = False
        try:
            queued = self._queue.push_with_haste(record)
        finally:
            with self._metrics_lock:
                self._pending_pushes -= 1
                self._metrics["logged" if queued else "dropped"] += 1
                self._pushes_done.notify_all()
        return queued

    # ------------------------------------------------------------------
    # Call-site API
    # ------------------------------------------------------------------

    def statement(
        self,
        severity: LevelLike,
        component: str,
        source_file: Optional[str] = None,
        source_line: Optional[int] = None,
        stacklevel: int = 1
    ) -> LogStatement:
        """
        Start a log statement.

        Source location defaults to the caller's frame.

        Args:
            severity: Record severity
            component: Component tag (e.g. "RADIO")
            source_file: Source file, looked up from the caller when None
            source_line: Source line, looked up from the caller when None
            stacklevel: Frames to skip when looking up the caller

        Returns:
            LogStatement to be used as a context manager; an invalid
            severity is reported and gives an inert statement
        """
        level = coerce_level(severity)
        if level is None:
            self.error(ENGINE_COMPONENT, f"Invalid log severity: {severity!r}")
            return LogStatement(self, SeverityLevel.OFF, component)
        severity = level

        if severity < self._global_level:
            return LogStatement(self, severity, component)

        if source_file is None or source_line is None:
            frame = sys._getframe(stacklevel)
            if source_file is None:
                source_file = frame.f_code.co_filename
            if source_line is None:
                source_line = frame.f_lineno

        return LogStatement(self, severity, component, source_file, source_line)

    def log(self, severity: LevelLike, component: str, message: str, **kwargs) -> None:
        """Log a message."""
        kwargs.setdefault("stacklevel", 2)
        stmt = self.statement(severity, component, **kwargs)
        try:
            stmt.write(message)
        finally:
            stmt.finish()

    def trace(self, component: str, message: str, **kwargs) -> None:
        """Log trace message."""
        self.log(SeverityLevel.TRACE, component, message, stacklevel=3, **kwargs)

    def debug(self, component: str, message: str, **kwargs) -> None:
        """Log debug message."""
        self.log(SeverityLevel.DEBUG, component, message, stacklevel=3, **kwargs)

    def info(self, component: str, message: str, **kwargs) -> None:
        """Log info message."""
        self.log(SeverityLevel.INFO, component, message, stacklevel=3, **kwargs)

    def warning(self, component: str, message: str, **kwargs) -> None:
        """Log warning message."""
        self.log(SeverityLevel.WARNING, component, message, stacklevel=3, **kwargs)

    def error(self, component: str, message: str, **kwargs) -> None:
        """Log error message."""
        self.log(SeverityLevel.ERROR, component, message, stacklevel=3, **kwargs)

    def fatal(self, component: str, message: str, **kwargs) -> None:
        """Log fatal message."""
        self.log(SeverityLevel.FATAL, component, message, stacklevel=3, **kwargs)

    # ------------------------------------------------------------------
    # Sinks and levels
    # ------------------------------------------------------------------

    @property
    def global_level(self) -> SeverityLevel:
        """Minimum severity accepted at the call site."""
        return self._global_level

    def add_logger(
        self,
        key: str,
        render_fn: RenderFn,
        level: Optional[LevelLike] = None
    ) -> None:
        """
        Add a sink, replacing any sink registered under the same key.

        Args:
            key: Unique sink name
            render_fn: Callable taking a LogRecord
            level: Optional threshold; a key without one receives everything
        """
        resolved = None
        if level is not None:
            resolved = self._resolve_level(level, self._sinks.get_level(key))
        self._sinks.add(key, render_fn, resolved)

    def remove_logger(self, key: str) -> Optional[RenderFn]:
        """Remove a sink by key, returning it."""
        return self._sinks.remove(key)

    def logger_keys(self) -> List[str]:
        """Registered sink keys."""
        return self._sinks.keys()

    def get_logger_level(self, key: str) -> SeverityLevel:
        """Threshold for a sink key."""
        return self._sinks.get_level(key)

    def set_log_level(self, level: LevelLike) -> None:
        """
        Set the global minimum severity.

        Invalid values keep the current level and log an error.
        """
        self._global_level = self._resolve_level(level, self._global_level)

    def set_logger_level(self, key: str, level: LevelLike) -> None:
        """
        Set the minimum severity for one sink.

        Applies to records dispatched after the call. Invalid values keep
        the current level and log an error.
        """
        current = self._sinks.get_level(key)
        self._sinks.set_level(key, self._resolve_level(level, current))

    def set_console_level(self, level: LevelLike) -> None:
        """Set the console sink threshold."""
        self.set_logger_level(CONSOLE_SINK_KEY, level)

    def set_file_level(self, level: LevelLike) -> None:
        """Set the file sink threshold."""
        self.set_logger_level(FILE_SINK_KEY, level)

    def _resolve_level(self, level: LevelLike, previous: SeverityLevel) -> SeverityLevel:
        """Convert a level value, logging an error and keeping ``previous`` if invalid."""
        resolved = coerce_level(level)
        if resolved is None:
            self.error(ENGINE_COMPONENT, f"Failed to set log level to: {level}")
            return previous
        return resolved

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def flush(self):
        """Wait until every queued record has been dispatched, then flush sinks."""
        if not self._stopped:
            self._queue.join()

        for entry in self._sinks.snapshot():
            if hasattr(entry.render_fn, "flush"):
                entry.render_fn.flush()

    def shutdown(self):
        """
        Shut down the engine.

        Signals the worker, waits for it to drain the buffer, then closes
        the sinks. Further calls do nothing.
        """
        with self._metrics_lock:
            if self._stopped:
                return
            self._stopped = True
            # Pushes already past the stopped check finish within push_timeout
            self._pushes_done.wait_for(lambda: self._pending_pushes == 0)

        self._exit.set()
        atexit.unregister(self.shutdown)

        if threading.current_thread() is self._worker_thread:
            self._close_on_exit = True
            return

        self._worker_thread.join()
        self._close_sinks()

    def _close_sinks(self):
        """Close every registered sink and the built-in ones."""
        for entry in self._sinks.snapshot():
            if hasattr(entry.render_fn, "close"):
                entry.render_fn.close()
        for sink in self._owned_sinks:
            sink.close()

    @property
    def is_running(self) -> bool:
        """Whether the worker is still consuming records."""
        return not self._stopped

    def get_metrics(self) -> dict:
        """Get logging metrics."""
        with self._metrics_lock:
            return self._metrics.copy()

    def __enter__(self) -> "LogEngine":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.shutdown()

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"LogEngine(name={self._config.name!r}, "
            f"level={self._global_level}, "
            f"sinks={self._sinks.keys()})"
        )
