"""
Base classes and helpers shared by all widget types.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Tuple

from ..commands.runner import CommandRunner
from ..device.themes import ColorScheme
from ..device.viewport import Viewport
from ..utils.errors import ParseError

logger = logging.getLogger(__name__)

Clock = Callable[[], float]
Position = Tuple[int, int]

BOOL_LITERALS = {
    "true": True,
    "1": True,
    "yes": True,
    "on": True,
    "false": False,
    "0": False,
    "no": False,
    "off": False,
}


class RefreshTimer:
    """
    Decides whether a widget's command is due again.

    A widget that has never refreshed is always due. Otherwise the command
    is due once strictly more than ``interval`` seconds have elapsed, so an
    interval of 0 refreshes on practically every cycle.

    Attributes:
        interval: Minimum seconds between command runs
        clock: Monotonic time source (injectable for tests)
    """

    def __init__(self, interval: int, clock: Clock = time.monotonic):
        self.interval = interval
        self.clock = clock

    def due(self, last_refresh: Optional[float]) -> bool:
        if last_refresh is None:
            return True
        return self.clock() - last_refresh > self.interval

    def now(self) -> float:
        return self.clock()


def split_output(output: str) -> Tuple[str, List[str]]:
    """Split command output into its leading token and the remaining tokens."""
    tokens = output.split()
    if not tokens:
        return "", []
    return tokens[0], tokens[1:]


def parse_count(output: str) -> int:
    """Parse the leading token of command output as a non-negative integer."""
    token, _ = split_output(output)
    if not (token.isascii() and token.isdigit()):
        raise ParseError(output, "a non-negative integer")
    return int(token)


def parse_flag(token: str) -> bool:
    """Parse a boolean literal such as ``true``, ``0`` or ``on``."""
    try:
        return BOOL_LITERALS[token.lower()]
    except KeyError:
        raise ParseError(token, "a boolean") from None


class BaseWidget(ABC):
    """
    Base class for the bar's widget kinds.

    The set of kinds is closed (meter, indicator, separator); each shares
    the same initialize/update/draw contract.

    Class Attributes:
        widget_type: Identifier matching the configuration discriminator
    """

    widget_type: str = None

    def __init__(self, config, colors: ColorScheme = ColorScheme()):
        if not self.widget_type:
            raise ValueError(f"{self.__class__.__name__} must define widget_type")

        self.config = config
        self.colors = colors

    @property
    def right(self) -> bool:
        return self.config.right

    @property
    def bottom(self) -> bool:
        return self.config.bottom

    @property
    def state(self):
        """Runtime state, or None for stateless widgets."""
        return None

    def initialize(self) -> None:
        """
        Establish baseline state with a one-time command run.

        Raises:
            ParseError: If the command output cannot be parsed
        """
        pass

    def update(self) -> bool:
        """
        Re-run the widget's command if it is due.

        Returns:
            True if the command was due this cycle

        Raises:
            ParseError: If the command output cannot be parsed
        """
        return False

    @abstractmethod
    def draw(self, viewport: Viewport, position: Position) -> None:
        """
        Draw the widget relative to its anchor.

        Args:
            viewport: Surface to draw on
            position: Anchor (x, y)
        """
        pass

    def __repr__(self) -> str:
        """String representation for debugging."""
        title = getattr(self.config, "title", None)
        return f"<{self.__class__.__name__}(type={self.widget_type}, title={title!r})>"


class CommandWidget(BaseWidget):
    """
    Widget whose value comes from an external command.

    Attributes:
        runner: Command capability
        timer: Refresh scheduler for the configured frequency
    """

    def __init__(
        self,
        config,
        runner: CommandRunner,
        colors: ColorScheme = ColorScheme(),
        clock: Clock = time.monotonic,
    ):
        super().__init__(config, colors)
        self.runner = runner
        self.timer = RefreshTimer(config.frequency, clock)

    def update(self) -> bool:
        if not self.timer.due(self.state.last_refresh):
            return False

        # Recorded before running so a failing command waits a full interval
        self.state.last_refresh = self.timer.now()
        self.refresh()
        return True

    @abstractmethod
    def refresh(self) -> None:
        """Run the command and store the parsed result."""
        pass
