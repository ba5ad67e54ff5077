"""Engine builder pattern"""

from dataclasses import replace
from pathlib import Path
from typing import List, Mapping, Optional, Tuple, Union

from log_engine.core.engine import LogEngine
from log_engine.core.engine_config import EngineConfig
from log_engine.core.severity import SeverityLevel
from log_engine.core.sink_registry import RenderFn
from log_engine.formatters.console_formatter import ConsoleFormat


class EngineBuilder:
    """Builder pattern for engine construction."""

    def __init__(self):
        self._config = EngineConfig()
        self._environ: Optional[Mapping[str, str]] = None
        self._use_env = False
        self._custom_sinks: List[Tuple[str, RenderFn, Optional[SeverityLevel]]] = []

    def with_name(self, name: str) -> "EngineBuilder":
        """Set engine name (used for the worker thread name)."""
        self._config.name = name
        return self

    def with_level(self, level: SeverityLevel) -> "EngineBuilder":
        """Set global minimum severity."""
        self._config.global_level = level
        return self

    def with_console(
        self,
        level: SeverityLevel = SeverityLevel.TRACE,
        show_color: bool = True,
        show_time: bool = False,
        show_thread: bool = False,
        show_source: bool = False
    ) -> "EngineBuilder":
        """Enable console output."""
        self._config.console_enabled = True
        self._config.console_level = level
        self._config.console_format = ConsoleFormat(
            show_color=show_color,
            show_time=show_time,
            show_thread=show_thread,
            show_source=show_source,
        )
        return self

    def without_console(self) -> "EngineBuilder":
        """Disable the built-in console sink."""
        self._config.console_enabled = False
        return self

    def with_file(
        self,
        filepath: Union[str, Path],
        level: SeverityLevel = SeverityLevel.TRACE
    ) -> "EngineBuilder":
        """Enable file output."""
        self._config.file_path = Path(filepath)
        self._config.file_level = level
        return self

    def with_sink(
        self,
        key: str,
        render_fn: RenderFn,
        level: Optional[SeverityLevel] = None
    ) -> "EngineBuilder":
        """
        Add a custom sink.

        Args:
            key: Unique sink name; reusing a built-in key replaces that sink
            render_fn: Callable taking a LogRecord
            level: Optional threshold for this sink

        Returns:
            Self for method chaining

        Example:
            audit = []
            engine = (EngineBuilder()
                .with_sink("audit", audit.append, SeverityLevel.FATAL)
                .build())
        """
        if not callable(render_fn):
            raise TypeError("render_fn must be callable")
        self._custom_sinks.append((key, render_fn, level))
        return self

    def with_queue_size(self, size: int) -> "EngineBuilder":
        """Set buffer capacity."""
        self._config.queue_size = size
        return self

    def with_timeouts(
        self,
        push_timeout: Optional[float] = None,
        pop_timeout: Optional[float] = None
    ) -> "EngineBuilder":
        """Set producer wait bound and worker poll interval (seconds)."""
        if push_timeout is not None:
            self._config.push_timeout = push_timeout
        if pop_timeout is not None:
            self._config.pop_timeout = pop_timeout
        return self

    def from_env(self, environ: Optional[Mapping[str, str]] = None) -> "EngineBuilder":
        """
        Apply environment overrides on top of the builder settings at build time.

        Args:
            environ: Mapping to read (default: os.environ)
        """
        self._use_env = True
        self._environ = environ
        return self

    def build(self) -> LogEngine:
        """Build and return configured engine."""
        # Re-run validation on the accumulated settings
        config = replace(self._config)
        if self._use_env:
            config = EngineConfig.from_env(self._environ, base=config)

        engine = LogEngine(config)

        for key, render_fn, level in self._custom_sinks:
            engine.add_logger(key, render_fn, level)

        return engine
