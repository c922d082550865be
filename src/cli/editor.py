#!/usr/bin/env python3
"""
Command Editor CLI.

Starts the interactive editor loop.

Usage:
    python -m src.cli.editor
    python -m src.cli.editor --path notes.txt --history-limit 20
    python -m src.cli.editor --script commands.txt --no-log-file
    python -m src.cli.editor --config editor.json --verbose
"""

import argparse
import logging
import sys
from typing import List, Optional

from src.app.application import Application
from src.app.constants import EXIT_FAILURE
from src.cli.utils import validate_input_file
from src.commands.command_history import CommandHistory
from src.core.editor import Editor
from src.core.editor_config import EditorConfig, load_config
from src.core.logging_config import setup_logging, shutdown_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Creates the argument parser for the editor CLI."""
    parser = argparse.ArgumentParser(
        description="Text editor demonstrating commands with undo history"
    )
    parser.add_argument("--config", "-c", help="JSON configuration file")
    parser.add_argument(
        "--script", "-s", help="Read commands from a file instead of stdin"
    )
    parser.add_argument(
        "--history-limit",
        type=int,
        help="Maximum number of commands kept for undo (0 = unlimited)",
    )
    parser.add_argument("--path", "-p", help="Initial document path")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )
    parser.add_argument(
        "--no-log-file", action="store_true", help="Do not write the log file"
    )
    return parser


def apply_overrides(config: EditorConfig, args: argparse.Namespace) -> EditorConfig:
    """
    Applies command-line flags on top of the loaded configuration.

    Args:
        config: Configuration from file and environment.
        args: Parsed command-line arguments.

    Returns:
        EditorConfig: The same config, updated.
    """
    if args.history_limit is not None:
        config.history_limit = args.history_limit
    if args.path is not None:
        config.initial_path = args.path
    if args.verbose:
        config.debug = True
        config.log_to_console = True
    if args.no_log_file:
        config.log_to_file = False
    return config


def run_editor(args: argparse.Namespace) -> int:
    """
    Runs the editor with the given arguments.

    Args:
        args: Parsed command-line arguments.

    Returns:
        int: Exit code (0 for success, 1 for failure, 130 on interrupt).
    """
    if not validate_input_file(args.config, "Config file"):
        print(f"✗ Config file not found: {args.config}")
        return EXIT_FAILURE
    if not validate_input_file(args.script, "Script file"):
        print(f"✗ Script file not found: {args.script}")
        return EXIT_FAILURE

    try:
        config = apply_overrides(load_config(args.config, validate=False), args)
    except (OSError, ValueError) as e:
        print(f"✗ Invalid configuration: {e}")
        return EXIT_FAILURE

    errors = config.validate()
    if errors:
        for err in errors:
            print(f"✗ Validation error: {err}")
        return EXIT_FAILURE

    setup_logging(
        debug_mode=config.debug,
        log_to_console=config.log_to_console,
        log_to_file=config.log_to_file,
        log_dir=config.log_dir,
    )

    script = None
    try:
        if args.script:
            script = open(args.script, "r", encoding="utf-8")

        app = Application(
            editor=Editor(path=config.initial_path),
            history=CommandHistory(max_size=config.max_history),
            input_stream=script,
            prompt=config.prompt,
        )
        return app.run()
    except Exception as e:
        logger.error(f"Editor failed: {e}")
        if args.verbose:
            raise
        return EXIT_FAILURE
    finally:
        if script:
            script.close()
        shutdown_logging()


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    sys.exit(run_editor(args))


if __name__ == "__main__":
    main()
