"""
Logging Configuration Module.

This module provides centralized logging configuration for the editor,
including a rotating file handler and optional console output.
"""

import logging
import os
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from typing import Optional

# Configuration
LOG_DIR = "logs"
LOG_FILENAME = "command_editor.log"
MAX_BYTES = 5 * 1024 * 1024  # 5 MB
BACKUP_COUNT = 5
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class SafeRotatingFileHandler(RotatingFileHandler):
    """
    A RotatingFileHandler that handles Windows file locking errors gracefully.

    On Windows, log rotation can fail with PermissionError if the file is still
    in use by another process. This handler keeps writing to the current file
    instead of crashing.
    """

    def doRollover(self) -> None:
        """
        Perform log file rotation, catching Windows file locking errors.
        """
        try:
            super().doRollover()
        except PermissionError:
            if sys.platform != "win32":
                raise
            # Rotation is retried on the next record


def setup_logging(
    debug_mode: bool = False,
    log_to_console: bool = False,
    log_to_file: bool = True,
    log_dir: Optional[str] = None,
) -> None:
    """
    Configures the root logger with a rotating file handler
    and optional console handler.

    Console logging goes to stderr so it never interleaves with the
    notifications the editor writes to stdout.

    Args:
        debug_mode (bool): If True, sets level to DEBUG. Defaults to False (INFO).
        log_to_console (bool): If True, adds a StreamHandler. Defaults to False.
        log_to_file (bool): If True, adds the rotating file handler.
        log_dir (Optional[str]): Directory for the log file. Defaults to LOG_DIR.
    """
    root_logger = logging.getLogger()

    # Remove existing handlers to avoid duplicates if called multiple times
    if root_logger.handlers:
        root_logger.handlers.clear()

    level = logging.DEBUG if debug_mode else logging.INFO
    root_logger.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if log_to_file:
        directory = log_dir or LOG_DIR
        try:
            os.makedirs(directory, exist_ok=True)
        except OSError as e:
            print(
                f"Failed to create log directory: {e}. Logging to current directory.",
                file=sys.stderr,
            )
            log_path = LOG_FILENAME
        else:
            log_path = os.path.join(directory, LOG_FILENAME)

        try:
            file_handler = SafeRotatingFileHandler(
                log_path,
                maxBytes=MAX_BYTES,
                backupCount=BACKUP_COUNT,
                encoding="utf-8",
                delay=True,
            )
            file_handler.setFormatter(formatter)
            file_handler.setLevel(level)
            root_logger.addHandler(file_handler)
        except OSError as e:
            print(f"CRITICAL: Could not set up file logging: {e}", file=sys.stderr)

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(level)
        root_logger.addHandler(console_handler)

    if not root_logger.handlers:
        root_logger.addHandler(logging.NullHandler())

    logging.info("=" * 60)
    logging.info(f"Command Editor Session Started at {datetime.now().isoformat()}")
    logging.info("=" * 60)


def get_logger(name: str) -> logging.Logger:
    """
    Convenience function to get a logger with the given name.

    Args:
        name (str): The name of the logger (usually __name__).

    Returns:
        logging.Logger: The logger instance.
    """
    return logging.getLogger(name)


def shutdown_logging() -> None:
    """
    Explicitly closes all logging handlers to release file locks.
    """
    logging.shutdown()
