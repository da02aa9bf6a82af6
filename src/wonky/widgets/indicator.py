"""
Indicator widget: a command-driven on/off block.
"""

import logging
import time
from dataclasses import dataclass
from typing import Optional

from ..commands.runner import CommandRunner
from ..config.models import IndicatorConfig
from ..device.themes import ColorScheme
from ..device.viewport import Viewport, block_width, centered_offset
from .base import Clock, CommandWidget, Position, parse_flag, split_output

logger = logging.getLogger(__name__)


@dataclass
class IndicatorState:
    value: bool = False
    reading: str = ""
    last_refresh: Optional[float] = None


class Indicator(CommandWidget):
    """
    Display a boolean as a coloured block.

    The first token of the command output is the state (``1``, ``true``,
    ``on`` ...); any further tokens are kept as the reading, e.g.
    ``1 charging`` is on with reading ``charging``.

    Configuration:
        extended: Also draw the reading inside the block (bloatie layout)

    Example:
        - type: indicator
          title: AC
          command: cat /sys/class/power_supply/AC/online
          frequency: 5
    """

    widget_type = "indicator"

    def __init__(
        self,
        config: IndicatorConfig,
        runner: CommandRunner,
        colors: ColorScheme = ColorScheme(),
        clock: Clock = time.monotonic,
        extended: bool = False,
    ):
        super().__init__(config, runner, colors, clock)
        self.extended = extended
        self._state = IndicatorState()

    @property
    def state(self) -> IndicatorState:
        return self._state

    def initialize(self) -> None:
        self.refresh()

    def refresh(self) -> None:
        output = self.runner.run(self.config.command)
        if output is None:
            return

        token, rest = split_output(output)
        value = parse_flag(token)
        self._state.value = value
        self._state.reading = " ".join(rest)

    def draw(self, viewport: Viewport, position: Position) -> None:
        x, y = position
        block = self.colors.foreground if self._state.value else self.colors.background

        viewport.draw_text(" " * block_width(viewport.width), x, y, bg=block)

        if self.config.title:
            viewport.draw_text(self.config.title, x, y, fg=self.colors.text, bg=block)

        if self.extended and self._state.reading:
            reading = self._state.reading
            column = max(x + centered_offset(viewport.width, len(reading)), x)
            viewport.draw_text(reading, column, y, fg=self.colors.text, bg=block)
