#!/usr/bin/env python3
"""
wonky CLI - command-line interface for the wonky status bar.

Runs the bar and manages its configuration file.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .config.loader import ConfigLoader, default_config_path
from .main import add_run_arguments
from .main import main as bar_main
from .utils.errors import ConfigurationError

EXAMPLE_CONFIG = """\
# wonky configuration
#
# Widgets are drawn in order. right/bottom pick the half and edge of the
# terminal a widget stacks on; frequency is the number of seconds between
# command runs (0 = every frame).

widgets:
  - type: meter
    title: RAM
    unit: mb
    max_command: echo 16014
    value_command: echo 8192
    frequency: 1
    right: false
    bottom: false
    meter: true
    reading: true
    theme: 1

  - type: separator

  - type: indicator
    title: AC
    command: cat /sys/class/power_supply/AC/online
    frequency: 5
    right: true

settings:
  bloatie: false
"""


class WonkyCLI:
    """Main CLI handler for wonky commands."""

    def __init__(self) -> None:
        self.default_config: Path = default_config_path()

    def _resolve(self, config_path: Optional[str]) -> Path:
        if config_path is None:
            return self.default_config
        return Path(config_path).expanduser()

    def run_bar(self, argv: List[str]) -> int:
        """
        Run the status bar in the foreground.

        Args:
            argv: Arguments for the bar's own entry point
        """
        try:
            bar_main(argv)
            return 0
        except SystemExit as e:
            return e.code if isinstance(e.code, int) else 1

    def show_config_path(self) -> int:
        """Print the default configuration path."""
        print(self.default_config)
        return 0

    def validate_config(self, config_path: Optional[str] = None) -> int:
        """
        Validate a configuration file.

        Args:
            config_path: File to validate (default location if None)
        """
        path = self._resolve(config_path)
        print(f"Validating {path}...")

        loader = ConfigLoader()
        try:
            config = loader.load(path)
        except ConfigurationError as e:
            print("\n❌ Validation FAILED with errors:")
            print(f"  ERROR: {e}")
            return 1

        print(f"\n✅ Configuration is valid ({len(config.widgets)} widgets)")

        if loader.warnings:
            print("\n⚠️  Warnings:")
            for warning in loader.warnings:
                print(f"  WARNING: {warning}")
        else:
            print("\n✨ Configuration looks good!")

        return 0

    def init_config(self, config_path: Optional[str] = None, force: bool = False) -> int:
        """
        Write the example configuration.

        Args:
            config_path: Destination (default location if None)
            force: Overwrite an existing file
        """
        path = self._resolve(config_path)

        if path.exists() and not force:
            print(f"Configuration already exists: {path}")
            print("Use --force to overwrite it.")
            return 1

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(EXAMPLE_CONFIG, encoding="utf-8")
        print(f"Wrote example configuration to {path}")
        return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="wonky",
        description="wonky - terminal status bar driven by shell commands",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  wonky run                              # Run with ~/.config/wonky/config.yaml
  wonky run ./bar.yaml --log-file bar.log
  wonky config path                      # Show the default config location
  wonky config init                      # Write an example config
  wonky config validate ./bar.yaml       # Validate a config file
""",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    run_parser = subparsers.add_parser("run", help="Run the status bar")
    run_parser.add_argument("config", nargs="?", default=None, help="Path to configuration file")
    add_run_arguments(run_parser)

    config_parser = subparsers.add_parser("config", help="Configuration management")
    config_subparsers = config_parser.add_subparsers(dest="config_command")

    config_subparsers.add_parser("path", help="Show the default configuration path")

    validate_parser = config_subparsers.add_parser("validate", help="Validate a configuration")
    validate_parser.add_argument("config", nargs="?", default=None, help="Configuration file")

    init_parser = config_subparsers.add_parser("init", help="Write an example configuration")
    init_parser.add_argument("config", nargs="?", default=None, help="Destination file")
    init_parser.add_argument("--force", action="store_true", help="Overwrite an existing file")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    cli = WonkyCLI()

    if args.command == "run":
        bar_argv = [
            "--log-level",
            args.log_level,
            "--frame-interval",
            str(args.frame_interval),
        ]
        if args.log_file:
            bar_argv.extend(["--log-file", args.log_file])
        if args.config:
            bar_argv.append(args.config)
        return cli.run_bar(bar_argv)

    elif args.command == "config":
        if args.config_command == "path":
            return cli.show_config_path()
        elif args.config_command == "validate":
            return cli.validate_config(args.config)
        elif args.config_command == "init":
            return cli.init_config(args.config, force=args.force)
        else:
            parser.print_help()
            return 1

    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
