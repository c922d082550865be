"""
Command History Module.

Linear stack of executed commands used for undo.
"""

import logging
from typing import Iterator, List, Optional

from src.commands.base_command import BaseCommand

logger = logging.getLogger(__name__)


class CommandHistory:
    """
    Stack of executed commands.

    The history owns the commands pushed onto it. pop() hands the most
    recent command back to the caller; clear() discards all of them.
    When max_size is set, pushing beyond it discards the oldest command.
    """

    def __init__(self, max_size: Optional[int] = None):
        """
        Initializes the history.

        Args:
            max_size: Maximum number of commands kept. None means unbounded.

        Raises:
            ValueError: If max_size is not positive.
        """
        if max_size is not None and max_size <= 0:
            raise ValueError("max_size must be a positive integer or None")
        self._commands: List[BaseCommand] = []
        self.max_size = max_size

    def push(self, command: BaseCommand) -> None:
        """
        Appends a command to the end of the history.

        Args:
            command: The executed command.
        """
        self._commands.append(command)
        if self.max_size is not None and len(self._commands) > self.max_size:
            dropped = self._commands.pop(0)
            logger.debug(f"History full, dropped oldest command: {dropped.describe()}")

    def pop(self) -> Optional[BaseCommand]:
        """
        Removes and returns the most recently pushed command.

        Returns:
            Optional[BaseCommand]: The command, or None if the history is empty.
        """
        if not self._commands:
            return None
        return self._commands.pop()

    def peek(self) -> Optional[BaseCommand]:
        """Returns the most recent command without removing it."""
        if not self._commands:
            return None
        return self._commands[-1]

    def clear(self) -> None:
        """Discards all recorded commands."""
        self._commands.clear()

    @property
    def is_empty(self) -> bool:
        return not self._commands

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[BaseCommand]:
        return iter(list(self._commands))
