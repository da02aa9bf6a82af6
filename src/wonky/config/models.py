"""
Configuration records for wonky.

Records are immutable once loaded; runtime values live in the widgets'
state objects.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class Settings:
    """Global display settings."""

    # Roomier layout and extended indicator rendering
    bloatie: bool = False


@dataclass(frozen=True)
class MeterConfig:
    """A numeric reading against a maximum, optionally drawn as a bar."""

    title: str
    unit: str
    max_command: str
    value_command: str
    prefix: Optional[str] = None
    frequency: int = 1
    right: bool = False
    bottom: bool = False
    meter: bool = True
    reading: bool = True
    theme: int = 0


@dataclass(frozen=True)
class IndicatorConfig:
    """A boolean state drawn as a coloured block."""

    command: str
    title: Optional[str] = None
    frequency: int = 1
    right: bool = False
    bottom: bool = False


@dataclass(frozen=True)
class SeparatorConfig:
    """A static label or an empty layout spacer."""

    title: Optional[str] = None
    right: bool = False
    bottom: bool = False


WidgetConfig = Union[MeterConfig, IndicatorConfig, SeparatorConfig]


@dataclass(frozen=True)
class WonkyConfig:
    """Configuration root: widgets in draw order plus settings."""

    widgets: Tuple[WidgetConfig, ...]
    settings: Settings = Settings()
