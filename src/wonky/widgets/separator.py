"""
Separator widget: a static label or an empty spacer.
"""

from ..config.models import SeparatorConfig
from ..device.themes import ColorScheme
from ..device.viewport import Viewport
from .base import BaseWidget, Position


class Separator(BaseWidget):
    """Draw the title, if any. An untitled separator only takes up a layout slot."""

    widget_type = "separator"

    def __init__(self, config: SeparatorConfig, colors: ColorScheme = ColorScheme()):
        super().__init__(config, colors)

    def draw(self, viewport: Viewport, position: Position) -> None:
        if self.config.title:
            x, y = position
            viewport.draw_text(self.config.title, x, y, fg=self.colors.foreground)
