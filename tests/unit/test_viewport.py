"""
Tests for the terminal viewport and layout helpers
"""

import io

import pytest
from rich.console import Console

from wonky.device.viewport import (
    READING_MARGIN,
    TerminalViewport,
    block_width,
    centered_offset,
)
from wonky.utils.errors import ViewportError


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=80, height=24, color_system="truecolor")


@pytest.fixture
def terminal(console):
    return TerminalViewport(console)


class TestLayoutHelpers:
    """Test centering and block width math"""

    def test_centered_offset(self):
        assert centered_offset(80, 10) == 28
        assert centered_offset(80, 8) == 30

    def test_centered_offset_odd_width(self):
        assert centered_offset(81, 10) == 28

    def test_reading_margin(self):
        assert READING_MARGIN == 2
        assert centered_offset(80, 10, margin=0) == 28 + READING_MARGIN

    def test_block_width(self):
        assert block_width(80) == 38
        assert block_width(3) == 0


class TestTerminalViewport:
    """Test drawing into the cell buffer"""

    def test_size_follows_console(self, terminal):
        assert (terminal.width, terminal.height) == (80, 24)

    def test_draw_text(self, terminal):
        terminal.draw_text("RAM", 1, 2)
        assert terminal.row_text(2).startswith(" RAM ")
        assert len(terminal.row_text(2)) == 80

    def test_draw_clips_at_right_edge(self, terminal):
        terminal.draw_text("overflowing", 75, 0)
        assert terminal.row_text(0).endswith("overf")
        assert len(terminal.row_text(0)) == 80

    @pytest.mark.parametrize("position", [(80, 0), (0, 24), (-1, 0), (0, -1)])
    def test_draw_outside_raises(self, terminal, position):
        with pytest.raises(ViewportError, match="outside"):
            terminal.draw_text("x", *position)

    def test_invalid_colour(self, terminal):
        with pytest.raises(ViewportError, match="colour"):
            terminal.draw_text("x", 0, 0, fg="not-a-colour")

    def test_styles_recorded(self, terminal):
        terminal.draw_text("AC", 0, 0, fg="black", bg="green")

        style = terminal.cell_style(0, 0)
        assert style.color.name == "black"
        assert style.bgcolor.name == "green"
        assert terminal.cell_style(5, 0) is None

    def test_clear(self, terminal):
        terminal.draw_text("RAM", 0, 0, fg="green")
        terminal.clear()
        assert terminal.row_text(0) == " " * 80
        assert terminal.cell_style(0, 0) is None

    def test_resize(self, terminal, console):
        assert terminal.resize() is False

        console.width = 100
        console.height = 30

        assert terminal.resize() is True
        assert (terminal.width, terminal.height) == (100, 30)
        assert terminal.row_text(29) == " " * 100

    def test_render(self, terminal):
        terminal.draw_text("RAM", 1, 0, fg="green")
        terminal.draw_text("AC", 1, 1, bg="dark_green")

        text = terminal.render()
        lines = text.plain.split("\n")

        assert len(lines) == 24
        assert lines[0] == " RAM".ljust(80)
        assert lines[1] == " AC".ljust(80)

    def test_present_without_session(self, terminal, console):
        terminal.draw_text("RAM", 1, 0)
        terminal.present()
        assert "RAM" in console.file.getvalue()
