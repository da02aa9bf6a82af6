"""
External command execution for widget data sources.
"""

import logging
import subprocess
from abc import ABC, abstractmethod
from typing import List, Optional

from ..utils.errors import CommandExecutionError

logger = logging.getLogger(__name__)


def split_command(command_line: str) -> List[str]:
    """
    Split a command line into program and arguments.

    Splitting is purely on whitespace: there is no shell, quoting or
    escaping. An empty or blank line yields an empty list.
    """
    return command_line.split()


class CommandRunner(ABC):
    """
    Runs a widget's command line and returns its captured output.

    Widgets only depend on this interface, so tests can substitute
    deterministic output without spawning processes.
    """

    @abstractmethod
    def run(self, command_line: str) -> Optional[str]:
        """
        Run a command line synchronously.

        Args:
            command_line: Program and whitespace-separated arguments

        Returns:
            Captured stdout with surrounding whitespace removed, or None if
            the command line is empty and nothing was run

        Raises:
            CommandExecutionError: If the command cannot be run or its
                output is not valid text
        """
        pass


class SubprocessRunner(CommandRunner):
    """Run commands as child processes and capture their stdout."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def run(self, command_line: str) -> Optional[str]:
        args = split_command(command_line)
        if not args:
            return None

        logger.debug(f"Running command: {args}")
        try:
            # No shell and no timeout: the redraw cycle blocks until exit.
            # stderr is captured so it never lands under the live display.
            result = subprocess.run(
                args, stdout=subprocess.PIPE, stderr=subprocess.PIPE, check=False
            )
        except OSError as e:
            raise CommandExecutionError(f"Failed to execute {args[0]!r}: {e}") from e

        if result.returncode != 0:
            logger.debug(f"Command {args[0]!r} exited with status {result.returncode}")
        if result.stderr:
            errors = result.stderr.decode(self.encoding, errors="replace").strip()
            logger.debug(f"Command {args[0]!r} wrote to stderr: {errors}")

        try:
            output = result.stdout.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise CommandExecutionError(
                f"Output of {command_line!r} is not valid {self.encoding}: {e}"
            ) from e

        return output.strip()
