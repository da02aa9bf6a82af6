"""
Main controller for the wonky status bar.
"""

import logging
import time
from pathlib import Path
from typing import Optional, Union

from .commands.runner import CommandRunner, SubprocessRunner
from .config.loader import ConfigLoader
from .config.models import WonkyConfig
from .device.themes import ColorScheme
from .device.viewport import TerminalViewport
from .managers import WidgetManager

logger = logging.getLogger(__name__)

# Seconds between redraws
DEFAULT_FRAME_INTERVAL = 0.1


class WonkyController:
    """
    Main controller orchestrating the redraw loop.

    Loads the configuration once, builds and initializes the widgets, then
    redraws the viewport every frame until stopped. Fatal errors (command
    execution, viewport) propagate to the caller.
    """

    def __init__(
        self,
        config_path: Optional[Union[str, Path]] = None,
        runner: Optional[CommandRunner] = None,
        viewport: Optional[TerminalViewport] = None,
        colors: ColorScheme = ColorScheme(),
        frame_interval: float = DEFAULT_FRAME_INTERVAL,
    ) -> None:
        """
        Initialize the controller.

        Args:
            config_path: Path to YAML configuration file (default location if None)
            runner: Command capability (default: SubprocessRunner)
            viewport: Terminal viewport (default: full terminal)
            colors: Colour scheme for all widgets
            frame_interval: Seconds to sleep between redraws
        """
        self.config_path = config_path
        self.config: Optional[WonkyConfig] = None
        self.running: bool = False
        self.frame_interval = frame_interval
        self.colors = colors

        self.config_loader = ConfigLoader()
        self.runner: CommandRunner = runner or SubprocessRunner()
        self.viewport = viewport or TerminalViewport()
        self.widget_manager: Optional[WidgetManager] = None

    def setup(self) -> None:
        """
        Load configuration and initialize every widget.

        Raises:
            ConfigurationError: If the configuration cannot be loaded
        """
        self.config = self.config_loader.load(self.config_path)
        self.widget_manager = WidgetManager(self.config, self.runner, colors=self.colors)
        self.widget_manager.initialize_widgets()
        logger.info(
            f"Bar ready with {self.widget_manager.get_widget_count()} widgets "
            f"(bloatie={self.config.settings.bloatie})"
        )

    def render_frame(self) -> int:
        """
        Run one redraw cycle.

        Returns:
            Number of widgets drawn
        """
        if self.viewport.resize():
            logger.info(f"Terminal is now {self.viewport.width}x{self.viewport.height}")

        self.viewport.clear()
        drawn = self.widget_manager.cycle(self.viewport)
        self.viewport.present()
        return drawn

    def stop(self) -> None:
        """Ask the loop to exit after the current frame."""
        self.running = False

    def run(self) -> None:
        """
        Main application run loop.

        Handles setup, the redraw loop and shutdown on Ctrl+C.
        """
        self.setup()
        self.running = True
        logger.info("wonky is running. Press Ctrl+C to exit.")

        try:
            with self.viewport.session():
                while self.running:
                    self.render_frame()

                    # Short sleep between frames
                    time.sleep(self.frame_interval)

        except KeyboardInterrupt:
            logger.info("Received shutdown signal")
        finally:
            logger.info("Shutting down wonky...")
            self.running = False
