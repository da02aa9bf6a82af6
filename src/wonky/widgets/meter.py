"""
Meter widget: a command-driven reading against a maximum.
"""

import logging
import time
from dataclasses import dataclass
from typing import Optional

from ..commands.runner import CommandRunner
from ..config.models import MeterConfig
from ..device.themes import ColorScheme, MeterTheme
from ..device.viewport import Viewport, centered_offset
from .base import Clock, CommandWidget, Position, parse_count

logger = logging.getLogger(__name__)


@dataclass
class MeterState:
    max_value: int = 0
    current_value: int = 0
    last_refresh: Optional[float] = None


class Meter(CommandWidget):
    """
    Display a value/maximum pair with an optional bar.

    The maximum is fetched once by initialize(); the current value is
    refreshed every ``frequency`` seconds. The two are independent and the
    current value may exceed the maximum.

    Example:
        - type: meter
          title: RAM
          unit: mb
          max_command: echo 16014
          value_command: memcheck
          frequency: 1
          theme: 1
    """

    widget_type = "meter"

    def __init__(
        self,
        config: MeterConfig,
        runner: CommandRunner,
        theme: MeterTheme,
        colors: ColorScheme = ColorScheme(),
        clock: Clock = time.monotonic,
    ):
        super().__init__(config, runner, colors, clock)
        self.theme = theme
        self._state = MeterState()

    @property
    def state(self) -> MeterState:
        return self._state

    def initialize(self) -> None:
        output = self.runner.run(self.config.max_command)
        if output is None:
            return
        self._state.max_value = parse_count(output)
        logger.debug(f"{self!r} maximum is {self._state.max_value}")

    def refresh(self) -> None:
        output = self.runner.run(self.config.value_command)
        if output is None:
            return
        self._state.current_value = parse_count(output)

    def reading_text(self) -> str:
        """Format the reading, e.g. ``512/2048mb``, with the prefix (if any) in front."""
        return (
            f"{self.config.prefix or ''}"
            f"{self._state.current_value}/{self._state.max_value}{self.config.unit}"
        )

    def draw(self, viewport: Viewport, position: Position) -> None:
        x, y = position
        title = self.config.title
        upper = max(y - 1, 0)

        viewport.draw_text(title, x, y, fg=self.colors.foreground)

        if self.config.reading:
            reading = self.reading_text()
            column = max(x + centered_offset(viewport.width, len(reading)), 0)
            viewport.draw_text(reading, column, upper, fg=self.colors.foreground)

        # Title also sits on the reading row; the bar covers row y
        if title:
            viewport.draw_text(title, x, upper, fg=self.colors.foreground)

        self.theme.draw(
            viewport,
            self.config,
            (float(self._state.current_value), float(self._state.max_value)),
            (x, y),
        )
