"""
Engine configuration management

Defaults live on the dataclass; environment variables override them when
the engine is created through from_env().
"""

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import List, Mapping, Optional
import os

from log_engine.core.severity import SeverityLevel, try_parse_level
from log_engine.formatters.console_formatter import ConsoleFormat

ENV_LEVEL = "LOG_ENGINE_LEVEL"
ENV_CONSOLE_LEVEL = "LOG_ENGINE_CONSOLE_LEVEL"
ENV_CONSOLE_DISABLE = "LOG_ENGINE_CONSOLE_DISABLE"
ENV_FILE_LEVEL = "LOG_ENGINE_FILE_LEVEL"
ENV_FILE = "LOG_ENGINE_FILE"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class EngineConfig:
    """
    Logging engine configuration.

    Read once when the engine starts; levels can be changed later through
    the engine API.
    """

    # Basic settings
    name: str = "log_engine"
    global_level: SeverityLevel = SeverityLevel.INFO

    # Console sink
    console_enabled: bool = True
    console_level: SeverityLevel = SeverityLevel.TRACE
    console_format: ConsoleFormat = field(default_factory=ConsoleFormat)

    # File sink (disabled when no path is set)
    file_path: Optional[Path] = None
    file_level: SeverityLevel = SeverityLevel.TRACE

    # Queue settings
    queue_size: int = 10000
    push_timeout: float = 0.05
    pop_timeout: float = 0.1

    # Diagnostics collected while reading the environment
    errors: List[str] = field(default_factory=list, repr=False)

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.queue_size <= 0:
            raise ValueError("queue_size must be positive")
        if self.push_timeout < 0:
            raise ValueError("push_timeout cannot be negative")
        if self.pop_timeout <= 0:
            raise ValueError("pop_timeout must be positive")
        for attr in ("global_level", "console_level", "file_level"):
            if not isinstance(getattr(self, attr), SeverityLevel):
                raise ValueError(f"{attr} must be SeverityLevel enum")

        # Convert file_path to Path if it's a string
        if isinstance(self.file_path, str):
            self.file_path = Path(self.file_path) if self.file_path else None

    @classmethod
    def default(cls) -> "EngineConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "EngineConfig":
        """Create configuration for debugging."""
        return cls(
            global_level=SeverityLevel.TRACE,
            console_format=ConsoleFormat(
                show_time=True, show_thread=True, show_source=True
            ),
        )

    @classmethod
    def production_config(cls) -> "EngineConfig":
        """Create configuration for production."""
        return cls(
            global_level=SeverityLevel.WARNING,
            console_format=ConsoleFormat(show_color=False, show_time=True),
            queue_size=50000,
        )

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        base: Optional["EngineConfig"] = None
    ) -> "EngineConfig":
        """
        Create configuration with environment overrides applied.

        Empty variables are ignored. Invalid level values keep the
        previous level and are recorded in ``errors``.

        Args:
            environ: Mapping to read (default: os.environ)
            base: Configuration supplying the defaults

        Returns:
            New EngineConfig
        """
        environ = os.environ if environ is None else environ
        config = replace(base) if base is not None else cls()
        config.errors = list(config.errors)

        for env_name, attr in (
            (ENV_LEVEL, "global_level"),
            (ENV_CONSOLE_LEVEL, "console_level"),
            (ENV_FILE_LEVEL, "file_level"),
        ):
            text = environ.get(env_name)
            if not text:
                continue
            level = try_parse_level(text)
            if level is None:
                config.errors.append(f"Failed to set log level to: {text}")
            else:
                setattr(config, attr, level)

        file_path = environ.get(ENV_FILE)
        if file_path:
            config.file_path = Path(file_path)

        disable = environ.get(ENV_CONSOLE_DISABLE)
        if disable:
            config.console_enabled = disable.strip().lower() not in _TRUTHY

        return config
