"""
wonky - A YAML-driven terminal status bar fed by shell commands
"""

__version__ = "0.1.0"

from .controller import WonkyController

__all__ = ["WonkyController"]
