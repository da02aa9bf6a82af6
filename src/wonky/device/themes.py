"""
Colour scheme and meter themes.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence, Set, Tuple

from ..config.models import MeterConfig
from .viewport import Viewport, block_width

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColorScheme:
    """Colours used by widgets and themes (rich colour names)."""

    foreground: str = "green"
    background: str = "dark_green"
    text: str = "black"


@dataclass(frozen=True)
class BarTheme:
    """Glyphs used for the filled and empty parts of a meter bar."""

    filled: str
    empty: str


DEFAULT_THEMES: Tuple[BarTheme, ...] = (
    BarTheme(filled="█", empty="░"),
    BarTheme(filled="■", empty="·"),
    BarTheme(filled="=", empty="-"),
    BarTheme(filled="●", empty="○"),
)


def fill_ratio(current: float, maximum: float) -> float:
    """Fraction of the bar to fill, clamped to [0, 1]. A zero maximum is empty."""
    if maximum <= 0:
        return 0.0
    return min(max(current / maximum, 0.0), 1.0)


class MeterTheme(ABC):
    """Paints the supplemental visual of a meter."""

    @abstractmethod
    def draw(
        self,
        viewport: Viewport,
        config: MeterConfig,
        values: Tuple[float, float],
        position: Tuple[int, int],
    ) -> None:
        """
        Draw the meter visual.

        Args:
            viewport: Surface to draw on
            config: Meter configuration (bar flag and theme index)
            values: (current, maximum)
            position: Anchor (x, y) of the meter
        """
        pass


class ThemeSet(MeterTheme):
    """
    Bar themes selected by the meter's theme index.

    An index past the end of the set falls back to the first theme.
    """

    def __init__(
        self,
        themes: Sequence[BarTheme] = DEFAULT_THEMES,
        colors: ColorScheme = ColorScheme(),
    ):
        if not themes:
            raise ValueError("ThemeSet requires at least one theme")
        self.themes = tuple(themes)
        self.colors = colors
        self._reported: Set[int] = set()

    def select(self, index: int) -> BarTheme:
        if 0 <= index < len(self.themes):
            return self.themes[index]

        if index not in self._reported:
            self._reported.add(index)
            logger.warning(f"Unknown meter theme {index}, using theme 0")
        return self.themes[0]

    def draw(
        self,
        viewport: Viewport,
        config: MeterConfig,
        values: Tuple[float, float],
        position: Tuple[int, int],
    ) -> None:
        if not config.meter:
            return

        width = block_width(viewport.width)
        if width == 0:
            return

        theme = self.select(config.theme)
        x, y = position
        filled = int(width * fill_ratio(*values))

        if filled:
            viewport.draw_text(theme.filled * filled, x, y, fg=self.colors.foreground)
        if filled < width:
            viewport.draw_text(theme.empty * (width - filled), x + filled, y, fg=self.colors.background)
