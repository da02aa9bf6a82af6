#!/usr/bin/env python3
"""
wonky - status bar entry point
"""

import argparse
import logging
import signal
import sys
from typing import List, Optional

from .controller import DEFAULT_FRAME_INTERVAL, WonkyController
from .utils.errors import ConfigurationError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the status bar."""
    parser = argparse.ArgumentParser(description="wonky - terminal status bar")
    parser.add_argument(
        "config",
        nargs="?",
        default=None,
        help="Path to YAML configuration file (default: ~/.config/wonky/config.yaml)",
    )
    add_run_arguments(parser)
    return parser


def add_run_arguments(parser: argparse.ArgumentParser) -> None:
    """Options shared by `wonky run` and this module's own parser."""
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write logs to this file instead of stderr",
    )
    parser.add_argument(
        "--frame-interval",
        type=float,
        default=DEFAULT_FRAME_INTERVAL,
        help=f"Seconds between redraws (default: {DEFAULT_FRAME_INTERVAL})",
    )


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point"""
    args = create_parser().parse_args(argv)

    # Set up logging
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOG_FORMAT,
        filename=args.log_file,
    )

    logger = logging.getLogger(__name__)

    controller = WonkyController(args.config, frame_interval=args.frame_interval)

    # Set up signal handlers for graceful shutdown
    def signal_handler(signum, frame):
        """Handle shutdown signals gracefully"""
        logger.info(f"Received signal {signum}, shutting down gracefully...")
        controller.stop()
        # Raise KeyboardInterrupt to trigger the normal shutdown flow
        raise KeyboardInterrupt()

    signal.signal(signal.SIGTERM, signal_handler)
    signal.signal(signal.SIGINT, signal_handler)

    try:
        controller.run()
    except KeyboardInterrupt:
        logger.info("Shutting down...")
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        print(f"wonky: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        logger.error(f"Fatal error: {e}")
        print(f"wonky: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
