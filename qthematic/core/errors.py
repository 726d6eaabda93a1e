"""Exception types raised by theme persistence."""

from typing import Optional


class ThemeError(Exception):
    """Base class for recoverable theme errors."""


class SerializationError(ThemeError):
    """A theme could not be encoded to JSON."""


class DeserializationError(ThemeError):
    """A theme document is malformed or has a value of the wrong type."""

    def __init__(self, reason: str, offending_key: Optional[str] = None):
        self.reason = reason
        self.offending_key = offending_key
        if offending_key:
            super().__init__(f"{reason} (key: {offending_key})")
        else:
            super().__init__(reason)


class ThemeIOError(ThemeError):
    """Reading or writing a theme file failed."""

    def __init__(self, operation: str, path: str, detail: str = ""):
        self.operation = operation
        self.path = str(path)
        message = f"Failed to {operation} theme file {self.path}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
