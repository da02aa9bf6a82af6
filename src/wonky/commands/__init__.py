"""
Command execution for wonky widgets
"""

from .runner import CommandRunner, SubprocessRunner, split_command

__all__ = ["CommandRunner", "SubprocessRunner", "split_command"]
