"""
Exception classes for the COBOL case folder.

This module defines all custom exceptions used throughout the case folder,
organized in a hierarchy for easy handling.
"""

from typing import Optional


class CaseFoldError(Exception):
    """Base exception for all case folder errors."""

    pass


class MalformedLineBreakError(CaseFoldError):
    """Carriage return not followed by a line feed.

    This is the only fatal input condition. Everything already written
    to the output stays written; processing stops immediately.

    Attributes:
        line: The 1-based physical line where the bad break occurred
        byte: The byte found after the carriage return (None at end of stream)
    """

    def __init__(self, line: int, byte: Optional[int] = None):
        self.line = line
        self.byte = byte
        super().__init__(f"bad input (CR without LF at line {line})")


class ConfigError(CaseFoldError):
    """Configuration error.

    Raised when there's an issue with the configuration,
    such as an unreadable config file or invalid values.
    """

    pass
