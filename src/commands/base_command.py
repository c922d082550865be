"""
Base Command Module.

Defines the abstract base class and result type for all editor commands.

Classes:
    CommandResult: Standardized result object for command execution.
    BaseCommand: Abstract base class implementing command pattern with undo.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict

from src.core.editor import Editor


@dataclass
class CommandResult:
    """
    Standardized result object for command execution.

    Attributes:
        success (bool): True if the command executed successfully,
                        False otherwise.
        message (str): A human-readable message describing the result.
        errors (Dict[str, str]): A dictionary of validation errors
                                 (field -> error content).
        command_name (str): The name of the command that generated
                            this result.
        data (Dict[str, Any]): Optional payload (e.g. the affected path).
    """

    success: bool
    message: str = ""
    errors: Dict[str, str] = field(default_factory=dict)
    command_name: str = ""
    data: Dict[str, Any] = field(default_factory=dict)


class BaseCommand(ABC):
    """
    Abstract base class for all user actions.

    The editor is passed to execute() and undo() rather than stored, so a
    command never outlives or owns its receiver.
    """

    name: str = ""

    def __init__(self):
        """
        Initializes the command.
        """
        self._is_executed = False

    @abstractmethod
    def execute(self, editor: Editor) -> CommandResult:
        """
        Performs the action.

        Args:
            editor (Editor): The editor to operate on.

        Returns:
            CommandResult: Result object.
        """
        pass

    @abstractmethod
    def undo(self, editor: Editor) -> None:
        """
        Reverts the action.

        Args:
            editor (Editor): The editor to operate on.
        """
        pass

    @property
    def is_executed(self) -> bool:
        """
        Checks if the command has been executed.

        Returns:
            bool: True if the command has been executed, False otherwise.
        """
        return self._is_executed

    def describe(self) -> str:
        """
        Returns a short label for history listings.
        """
        return self.name
