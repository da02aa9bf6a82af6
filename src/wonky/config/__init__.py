"""
Configuration loading and records for wonky
"""

from .loader import ConfigLoader, default_config_path
from .models import (
    IndicatorConfig,
    MeterConfig,
    SeparatorConfig,
    Settings,
    WidgetConfig,
    WonkyConfig,
)

__all__ = [
    "ConfigLoader",
    "default_config_path",
    "IndicatorConfig",
    "MeterConfig",
    "SeparatorConfig",
    "Settings",
    "WidgetConfig",
    "WonkyConfig",
]
