"""
Error handling utilities and boundaries for wonky.

Provides the exception hierarchy and the boundary used to keep a single
misbehaving widget from taking down the whole bar.
"""

import logging
from functools import wraps
from typing import Any, Callable, Tuple, Type, TypeVar

logger = logging.getLogger(__name__)

# Type variable for generic function decoration
F = TypeVar("F", bound=Callable[..., Any])


class WonkyError(Exception):
    """Base exception for all wonky-specific errors."""

    pass


class ConfigurationError(WonkyError):
    """Raised when the configuration file is missing or invalid."""

    def __init__(self, message: str, path: Any = None):
        if path is not None:
            message = f"{message} (config: {path})"
        super().__init__(message)
        self.path = path


class CommandExecutionError(WonkyError):
    """Raised when an external command cannot be run or emits invalid text."""

    pass


class ParseError(WonkyError):
    """Raised when command output cannot be parsed into the expected type."""

    def __init__(self, output: str, expected: str):
        super().__init__(f"Cannot parse {output!r} as {expected}")
        self.output = output
        self.expected = expected


class ViewportError(WonkyError):
    """Raised when drawing to the viewport fails."""

    pass


def error_boundary(
    *,
    exceptions: Tuple[Type[BaseException], ...] = (Exception,),
    reraise: bool = False,
    default_return: Any = None,
    log_level: int = logging.ERROR,
) -> Callable[[F], F]:
    """
    Decorator to create consistent error boundaries around functions.

    Only the listed exception types are caught; anything else propagates
    untouched, so fatal errors still reach the entry point.

    Args:
        exceptions: Exception types handled by this boundary
        reraise: If True, re-raise the exception after logging
        default_return: Value to return if error occurs and not reraising
        log_level: Logging level for the error (default: ERROR)

    Returns:
        Decorated function with error handling

    Example:
        >>> @error_boundary(exceptions=(ParseError,), log_level=logging.WARNING)
        ... def refresh(widget):
        ...     widget.update()
        ...     return True
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except exceptions as e:
                logger.log(
                    log_level,
                    f"Error in {func.__name__}: {e}",
                    exc_info=log_level >= logging.ERROR,
                    extra={"function": func.__name__},
                )

                if reraise:
                    raise

                return default_return

        return wrapper  # type: ignore

    return decorator
