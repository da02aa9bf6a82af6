"""
Terminal drawing surface and meter themes
"""

from .themes import DEFAULT_THEMES, BarTheme, ColorScheme, MeterTheme, ThemeSet
from .viewport import TerminalViewport, Viewport

__all__ = [
    "BarTheme",
    "ColorScheme",
    "DEFAULT_THEMES",
    "MeterTheme",
    "TerminalViewport",
    "ThemeSet",
    "Viewport",
]
