"""
Terminal viewport for wonky.

The viewport is a cell buffer the widgets draw positioned text into; once a
cycle is drawn the buffer is presented to the terminal through rich.
"""

import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator, List, Optional, Tuple

from rich.color import ColorParseError
from rich.console import Console
from rich.live import Live
from rich.style import Style
from rich.text import Text

from ..utils.errors import ViewportError

logger = logging.getLogger(__name__)

# Visual margin between a reading and the end of its half of the bar
READING_MARGIN = 2

# Columns kept free at the end of a block or meter bar
BLOCK_MARGIN = 2

Cell = Tuple[str, Optional[Style]]


def centered_offset(viewport_width: int, text_length: int, margin: int = READING_MARGIN) -> int:
    """
    Column offset, relative to an anchor, that ends a text in half the viewport.

    >>> centered_offset(80, 10)
    28
    """
    return viewport_width // 2 - margin - text_length


def block_width(viewport_width: int) -> int:
    """Width of an indicator block or meter bar."""
    return max(viewport_width // 2 - BLOCK_MARGIN, 0)


class Viewport(ABC):
    """Drawing surface exposing its size and a positioned-text primitive."""

    @property
    @abstractmethod
    def width(self) -> int:
        pass

    @property
    @abstractmethod
    def height(self) -> int:
        pass

    @abstractmethod
    def draw_text(
        self,
        text: str,
        x: int,
        y: int,
        fg: Optional[str] = None,
        bg: Optional[str] = None,
    ) -> None:
        """
        Draw text starting at column x, row y.

        Args:
            text: Text to draw, clipped at the right edge
            x: Column of the first character
            y: Row
            fg: Foreground colour name, or None for the terminal default
            bg: Background colour name, or None for the terminal default

        Raises:
            ViewportError: If (x, y) lies outside the viewport or a colour
                is invalid
        """
        pass


class TerminalViewport(Viewport):
    """
    Viewport backed by a rich Console.

    Attributes:
        console: Console the buffer is presented on
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
        self._width = 0
        self._height = 0
        self._cells: List[List[Cell]] = []
        self._live: Optional[Live] = None
        self.resize()

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def resize(self) -> bool:
        """
        Match the buffer to the current terminal size.

        Returns:
            True if the size changed
        """
        width, height = self.console.size
        if (width, height) == (self._width, self._height):
            return False

        logger.debug(f"Viewport resized to {width}x{height}")
        self._width = width
        self._height = height
        self.clear()
        return True

    def clear(self) -> None:
        """Blank every cell."""
        self._cells = [[(" ", None) for _ in range(self._width)] for _ in range(self._height)]

    def draw_text(
        self,
        text: str,
        x: int,
        y: int,
        fg: Optional[str] = None,
        bg: Optional[str] = None,
    ) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise ViewportError(
                f"Position ({x}, {y}) is outside the {self._width}x{self._height} viewport"
            )

        try:
            style = Style(color=fg, bgcolor=bg) if (fg or bg) else None
        except ColorParseError as e:
            raise ViewportError(f"Invalid colour: {e}") from e

        row = self._cells[y]
        for column, char in enumerate(text, start=x):
            if column >= self._width:
                break
            row[column] = (char, style)

    def row_text(self, y: int) -> str:
        """Plain text of one row, without styles."""
        return "".join(char for char, _ in self._cells[y])

    def cell_style(self, x: int, y: int) -> Optional[Style]:
        return self._cells[y][x][1]

    def render(self) -> Text:
        """Build a rich Text of the whole buffer, one line per row."""
        lines = []
        for row in self._cells:
            line = Text()
            run = ""
            run_style: Optional[Style] = None
            for char, style in row:
                if style != run_style and run:
                    line.append(run, style=run_style)
                    run = ""
                run_style = style
                run += char
            if run:
                line.append(run, style=run_style)
            lines.append(line)

        return Text("\n", no_wrap=True, overflow="crop").join(lines)

    @contextmanager
    def session(self) -> Iterator["TerminalViewport"]:
        """Take over the terminal (alternate screen) for the duration of the block."""
        with Live(
            console=self.console,
            screen=True,
            auto_refresh=False,
            transient=True,
        ) as live:
            self._live = live
            try:
                yield self
            finally:
                self._live = None

    def present(self) -> None:
        """Show the current buffer on the terminal."""
        renderable = self.render()
        if self._live is not None:
            self._live.update(renderable, refresh=True)
        else:
            self.console.print(renderable)
