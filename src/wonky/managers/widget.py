"""
Widget management for the status bar.

This module builds widgets from configuration, places them on the
viewport, and runs their per-cycle update and draw.
"""

import logging
import time
from typing import Any, Dict, List, Optional

from ..commands.runner import CommandRunner
from ..config.models import (
    IndicatorConfig,
    MeterConfig,
    SeparatorConfig,
    WidgetConfig,
    WonkyConfig,
)
from ..device.themes import ColorScheme, MeterTheme, ThemeSet
from ..device.viewport import Viewport
from ..utils.errors import ParseError, error_boundary
from ..widgets import BaseWidget, Indicator, Meter, Separator
from ..widgets.base import Clock, Position

logger = logging.getLogger(__name__)

# Rows between stacked widgets in the compact and bloatie layouts
COMPACT_PITCH = 2
BLOATIE_PITCH = 3


@error_boundary(exceptions=(ParseError,), default_return=False, log_level=logging.WARNING)
def initialize_widget(widget: BaseWidget) -> bool:
    """Initialize one widget; a parse failure keeps its default state."""
    widget.initialize()
    return True


@error_boundary(exceptions=(ParseError,), default_return=False, log_level=logging.WARNING)
def refresh_widget(widget: BaseWidget) -> bool:
    """Update one widget; a parse failure keeps its last good value."""
    return widget.update()


class WidgetManager:
    """
    Manages the bar's widgets.

    Responsibilities:
    - Building widgets from configuration records
    - Anchor assignment from the right/bottom placement flags
    - Per-cycle update and draw, strictly in configured order

    Parse errors from a widget's command are logged and skipped for that
    cycle; every other error propagates.
    """

    def __init__(
        self,
        config: WonkyConfig,
        runner: CommandRunner,
        theme: Optional[MeterTheme] = None,
        colors: ColorScheme = ColorScheme(),
        clock: Clock = time.monotonic,
    ):
        """
        Initialize the widget manager.

        Args:
            config: Validated configuration
            runner: Command capability shared by all widgets
            theme: Meter theme capability (default: ThemeSet with the same colours)
            colors: Colour scheme for all widgets
            clock: Time source for the refresh scheduler
        """
        self.settings = config.settings
        self.runner = runner
        self.colors = colors
        self.theme = theme if theme is not None else ThemeSet(colors=colors)
        self.clock = clock
        self.widgets: List[BaseWidget] = [self._build(record) for record in config.widgets]

    def _build(self, record: WidgetConfig) -> BaseWidget:
        if isinstance(record, MeterConfig):
            return Meter(record, self.runner, self.theme, self.colors, self.clock)
        if isinstance(record, IndicatorConfig):
            return Indicator(
                record, self.runner, self.colors, self.clock, extended=self.settings.bloatie
            )
        if isinstance(record, SeparatorConfig):
            return Separator(record, self.colors)
        raise TypeError(f"Unsupported widget configuration: {record!r}")

    @property
    def row_pitch(self) -> int:
        return BLOATIE_PITCH if self.settings.bloatie else COMPACT_PITCH

    def initialize_widgets(self) -> int:
        """
        Run every widget's one-time initialization.

        Returns:
            Number of widgets initialized without a parse error
        """
        initialized = sum(1 for widget in self.widgets if initialize_widget(widget))
        logger.info(f"Initialized {initialized}/{len(self.widgets)} widgets")
        return initialized

    def states(self) -> Dict[int, Any]:
        """Runtime state of each stateful widget, keyed by widget index."""
        return {
            index: widget.state
            for index, widget in enumerate(self.widgets)
            if widget.state is not None
        }

    def layout(self, width: int, height: int) -> List[Optional[Position]]:
        """
        Assign an anchor to every widget.

        Widgets are split into a left column and a right column. Top widgets
        stack downward from row 1, bottom widgets upward from the last row;
        every widget, separators included, takes one slot.

        Args:
            width: Viewport width
            height: Viewport height

        Returns:
            Anchor per widget, or None where the widget does not fit
        """
        pitch = self.row_pitch
        slots: Dict[tuple, int] = {}
        anchors: List[Optional[Position]] = []

        for widget in self.widgets:
            key = (widget.right, widget.bottom)
            slot = slots.get(key, 0)
            slots[key] = slot + 1

            x = width // 2 + 1 if widget.right else 1
            y = height - 1 - slot * pitch if widget.bottom else 1 + slot * pitch

            if 0 <= x < width and 0 <= y < height:
                anchors.append((x, y))
            else:
                anchors.append(None)

        return anchors

    def cycle(self, viewport: Viewport) -> int:
        """
        Update and draw every widget in configured order.

        Args:
            viewport: Surface to draw on

        Returns:
            Number of widgets drawn
        """
        anchors = self.layout(viewport.width, viewport.height)
        drawn = 0

        for widget, anchor in zip(self.widgets, anchors):
            refresh_widget(widget)

            if anchor is None:
                logger.debug(f"No room for {widget!r} in {viewport.width}x{viewport.height}")
                continue

            widget.draw(viewport, anchor)
            drawn += 1

        return drawn

    def get_widget_count(self) -> int:
        """Get the count of widgets."""
        return len(self.widgets)
