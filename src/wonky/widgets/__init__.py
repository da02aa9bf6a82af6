"""
Widget kinds drawn on the bar.

The set is closed:
- Meter: numeric reading against a maximum, with an optional bar
- Indicator: boolean state drawn as a coloured block
- Separator: static label or spacer

Meters and indicators refresh their values from external commands on a
per-widget interval.
"""

from .base import BaseWidget, CommandWidget, RefreshTimer, parse_count, parse_flag, split_output
from .indicator import Indicator, IndicatorState
from .meter import Meter, MeterState
from .separator import Separator

__all__ = [
    "BaseWidget",
    "CommandWidget",
    "Indicator",
    "IndicatorState",
    "Meter",
    "MeterState",
    "RefreshTimer",
    "Separator",
    "parse_count",
    "parse_flag",
    "split_output",
]
