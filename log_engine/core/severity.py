"""
Severity level enumeration

Ordered log levels plus the OFF sentinel, and the level parser used by
configuration and the runtime level setters.
"""

from enum import IntEnum
import string
from typing import Dict, Optional, Union


class SeverityLevel(IntEnum):
    """
    Severity of a log record.

    Lower values are more verbose. OFF is not a real level: it sits above
    FATAL so that a threshold of OFF suppresses every record.
    """

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
    FATAL = 5
    OFF = 6

    def __str__(self) -> str:
        """String representation of severity level."""
        return self.name

    @property
    def color_code(self) -> str:
        """
        Get ANSI color code for this level.

        Returns:
            ANSI escape sequence
        """
        return _COLORS.get(self, RESET_COLORS)

    @property
    def reset_code(self) -> str:
        """ANSI reset code."""
        return RESET_COLORS


RESET_COLORS = "\033[39;0m"

_COLORS: Dict[SeverityLevel, str] = {
    SeverityLevel.TRACE: "\033[35;1m",    # Purple
    SeverityLevel.DEBUG: "\033[34;1m",    # Blue
    SeverityLevel.INFO: "\033[32;1m",     # Green
    SeverityLevel.WARNING: "\033[33;1m",  # Yellow
    SeverityLevel.ERROR: "\033[31;0m",    # Red
    SeverityLevel.FATAL: "\033[31;1m",    # Bright red
}

# Names accepted by the parser (case-sensitive)
LEVEL_FROM_NAME: Dict[str, SeverityLevel] = {
    level.name.lower(): level for level in SeverityLevel
}

LevelLike = Union[SeverityLevel, int, str]


def try_parse_level(text: str) -> Optional[SeverityLevel]:
    """
    Parse a severity level from text.

    Text starting with a digit is read as an ordinal, which must lie
    between TRACE and FATAL. Otherwise the text must be one of the
    lower-case level names, including "off".

    Args:
        text: Level string, e.g. "warning" or "3"

    Returns:
        Parsed level, or None if the text is not a valid level
    """
    if not text:
        return None

    if text[0] in string.digits:
        digits = ""
        for char in text:
            if char not in string.digits:
                break
            digits += char
        value = int(digits)
        if SeverityLevel.TRACE <= value <= SeverityLevel.FATAL:
            return SeverityLevel(value)
        return None

    return LEVEL_FROM_NAME.get(text)


def parse_level(text: str, default: SeverityLevel) -> SeverityLevel:
    """Parse a level, falling back to ``default`` on invalid input."""
    level = try_parse_level(text)
    return default if level is None else level


def coerce_level(value: LevelLike) -> Optional[SeverityLevel]:
    """
    Convert a level, ordinal or level string into a SeverityLevel.

    Ints must be valid ordinals (OFF included). Strings go through
    try_parse_level.

    Returns:
        SeverityLevel, or None if the value is not a valid level
    """
    if isinstance(value, SeverityLevel):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        try:
            return SeverityLevel(value)
        except ValueError:
            return None
    if isinstance(value, str):
        return try_parse_level(value)
    return None
