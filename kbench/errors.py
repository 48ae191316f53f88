"""
Errors raised while loading or interpreting bench configuration.
"""

from typing import Optional


class BenchConfigError(Exception):
    """Base class for bench configuration failures."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class BenchReadError(BenchConfigError):
    """Raised when the bench file cannot be read (missing, permissions, I/O)."""
    pass


class BenchParseError(BenchConfigError):
    """Raised when the bench file is not valid YAML or does not fit the schema."""
    pass


class InvalidResolutionModeError(BenchConfigError, ValueError):
    """Raised when a service resolution mode is not recognised."""
    pass
