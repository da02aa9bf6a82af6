"""
Managers for the status bar.

- WidgetManager: widget construction, layout and the per-cycle update/draw
"""

from .widget import WidgetManager

__all__ = ["WidgetManager"]
