"""
Pytest configuration and fixtures
"""

from typing import Dict, List, Optional, Union
from unittest.mock import Mock

import pytest
import yaml

from wonky.commands.runner import CommandRunner, split_command
from wonky.device.viewport import Viewport


class FakeRunner(CommandRunner):
    """
    Command runner returning canned output.

    Outputs are keyed by command line; a list is consumed one entry per run
    and its last entry repeats.
    """

    def __init__(self, outputs: Optional[Dict[str, Union[str, List[str]]]] = None):
        self.outputs = dict(outputs or {})
        self.calls: List[str] = []

    def run(self, command_line: str) -> Optional[str]:
        if not split_command(command_line):
            return None

        self.calls.append(command_line)
        output = self.outputs.get(command_line, "")
        if isinstance(output, list):
            return output.pop(0) if len(output) > 1 else output[0]
        return output


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingViewport(Viewport):
    """Viewport that records draw calls instead of drawing."""

    def __init__(self, width: int = 80, height: int = 24):
        self._width = width
        self._height = height
        self.calls: List[tuple] = []

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def draw_text(self, text, x, y, fg=None, bg=None):
        self.calls.append((text, x, y, fg, bg))

    def texts(self) -> List[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def fake_runner():
    """Runner with no canned output"""
    return FakeRunner()


@pytest.fixture
def make_runner():
    """Factory for runners with canned output"""
    return FakeRunner


@pytest.fixture
def make_viewport():
    """Factory for recording viewports of a given size"""
    return RecordingViewport


@pytest.fixture
def fake_clock():
    """Clock starting at t=1000"""
    return FakeClock()


@pytest.fixture
def viewport():
    """80x24 recording viewport"""
    return RecordingViewport()


@pytest.fixture
def sample_config():
    """Sample configuration for testing"""
    return {
        "widgets": [
            {
                "type": "meter",
                "title": "RAM",
                "unit": "mb",
                "max_command": "echo 2048",
                "value_command": "memcheck",
                "frequency": 1,
                "right": True,
                "bottom": False,
                "meter": True,
                "reading": True,
                "theme": 1,
            },
            {
                "type": "indicator",
                "title": "AC",
                "command": "acstatus",
                "frequency": 5,
            },
            {"type": "separator"},
        ],
        "settings": {"bloatie": False},
    }


@pytest.fixture
def config_file(tmp_path, sample_config):
    """Create a temporary config file"""
    config_path = tmp_path / "config.yaml"
    with open(config_path, "w") as f:
        yaml.dump(sample_config, f)
    return config_path


@pytest.fixture(autouse=True)
def no_subprocess_calls(monkeypatch):
    """Prevent actual subprocess calls during testing"""
    monkeypatch.setattr(
        "subprocess.run", Mock(return_value=Mock(returncode=0, stdout=b"", stderr=b""))
    )
