"""
Utility modules for wonky.
"""

from .errors import (
    CommandExecutionError,
    ConfigurationError,
    ParseError,
    ViewportError,
    WonkyError,
    error_boundary,
)

__all__ = [
    "WonkyError",
    "ConfigurationError",
    "CommandExecutionError",
    "ParseError",
    "ViewportError",
    "error_boundary",
]
