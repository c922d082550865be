"""
CLI Utilities Module.

Common utility functions for CLI tools.
"""

import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


def validate_input_file(file_path: Optional[str], description: str = "File") -> bool:
    """
    Validate that an optional input file exists and is a regular file.

    Args:
        file_path: Path to check. None is accepted (nothing to validate).
        description: Label used in log messages (e.g. "Config file").

    Returns:
        True if valid, False otherwise.
    """
    if file_path is None:
        return True

    path = Path(file_path)

    if not path.exists():
        logger.error(f"{description} not found: {file_path}")
        return False

    if not path.is_file():
        logger.error(f"{description} is not a regular file: {file_path}")
        return False

    return True
