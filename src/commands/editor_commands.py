"""
Editor Commands Module.

Implements the Command pattern for editor operations.
Each command pairs an action on the Editor with its reversal.

Classes:
    SaveCommand: Saves the document; undo reverts the last change.
    SaveAsCommand: Saves under a new path; undo restores the previous path.
    OpenCommand: Opens a document; undo closes it.
    PrintCommand: Prints the document; undo does nothing.
    CloseCommand: Closes the document; undo reopens the current path.
    NewCommand: Creates a new document; undo closes it.
    CloneRepositoryCommand: Clones a repository; undo does nothing.

Undo of PrintCommand and CloneRepositoryCommand is a no-op because neither
action can be taken back. CloseCommand.undo reopens whatever path the editor
reports when undo runs, which is not necessarily the path that was open when
the command executed.
"""

import logging
from typing import Callable

from src.commands.base_command import BaseCommand, CommandResult
from src.core.editor import Editor

logger = logging.getLogger(__name__)


def _run_action(
    command: BaseCommand, action: Callable[[], None], message: str
) -> CommandResult:
    """
    Runs an editor action and wraps the outcome in a CommandResult.

    The caller updates its own executed flag from result.success. On
    failure, errors maps the command name to the exception text.

    Args:
        command: The command performing the action.
        action: Zero-argument callable invoking the editor.
        message: Success message.

    Returns:
        CommandResult: Success or failure result.
    """
    command_name = command.__class__.__name__
    try:
        action()
        logger.info(f"{command_name}: {message}")
        return CommandResult(
            success=True,
            message=message,
            command_name=command_name,
        )
    except Exception as e:
        logger.error(f"Failed to execute {command_name}: {e}")
        return CommandResult(
            success=False,
            message=str(e),
            errors={command.name or command_name: str(e)},
            command_name=command_name,
        )


class SaveCommand(BaseCommand):
    """
    Saves the current document.

    Undo reverts the last change.
    """

    name = "save"

    def execute(self, editor: Editor) -> CommandResult:
        result = _run_action(self, editor.save, "Saved file")
        self._is_executed = result.success
        return result

    def undo(self, editor: Editor) -> None:
        if self._is_executed:
            editor.revert()
            self._is_executed = False
            logger.info("Undid save")


class SaveAsCommand(BaseCommand):
    """
    Saves the current document under a new path.

    The previous path is captured when the command is created, so undo
    restores exactly that path regardless of what happened in between.
    """

    name = "saveas"

    def __init__(self, new_path: str, old_path: str):
        """
        Initializes the command.

        Args:
            new_path: The path to save to.
            old_path: The editor path at construction time.
        """
        super().__init__()
        self._new_path = new_path
        self._old_path = old_path

    @classmethod
    def for_editor(cls, editor: Editor, new_path: str) -> "SaveAsCommand":
        """
        Creates the command, capturing the editor's current path.

        Args:
            editor: The editor whose path is recorded for undo.
            new_path: The path to save to.

        Returns:
            SaveAsCommand: The new command.
        """
        return cls(new_path=new_path, old_path=editor.get_path())

    @property
    def new_path(self) -> str:
        return self._new_path

    @property
    def old_path(self) -> str:
        return self._old_path

    def execute(self, editor: Editor) -> CommandResult:
        result = _run_action(
            self,
            lambda: editor.save_as(self._new_path),
            f"Saved file as '{self._new_path}'",
        )
        self._is_executed = result.success
        result.data = {"path": self._new_path, "previous_path": self._old_path}
        return result

    def undo(self, editor: Editor) -> None:
        if self._is_executed:
            editor.set_path(self._old_path)
            self._is_executed = False
            logger.info(f"Undid save as: path restored to '{self._old_path}'")

    def describe(self) -> str:
        return f"{self.name} {self._new_path}"


class OpenCommand(BaseCommand):
    """
    Opens a document.

    Undo closes it.
    """

    name = "open"

    def __init__(self, file_path: str):
        """
        Initializes the command.

        Args:
            file_path: The path of the document to open.
        """
        super().__init__()
        self._file_path = file_path

    @property
    def file_path(self) -> str:
        return self._file_path

    def execute(self, editor: Editor) -> CommandResult:
        result = _run_action(
            self,
            lambda: editor.open(self._file_path),
            f"Opened file '{self._file_path}'",
        )
        self._is_executed = result.success
        result.data = {"path": self._file_path}
        return result

    def undo(self, editor: Editor) -> None:
        if self._is_executed:
            editor.close()
            self._is_executed = False
            logger.info(f"Undid open of '{self._file_path}'")

    def describe(self) -> str:
        return f"{self.name} {self._file_path}"


class PrintCommand(BaseCommand):
    """
    Prints the current document.

    Printing cannot be taken back, so undo does nothing.
    """

    name = "print"

    def execute(self, editor: Editor) -> CommandResult:
        result = _run_action(self, editor.print_file, "Printed file")
        self._is_executed = result.success
        return result

    def undo(self, editor: Editor) -> None:
        logger.debug("Undo of print is a no-op")


class CloseCommand(BaseCommand):
    """
    Closes the current document.

    Undo reopens the path the editor reports at undo time.
    """

    name = "close"

    def execute(self, editor: Editor) -> CommandResult:
        result = _run_action(self, editor.close, "Closed file")
        self._is_executed = result.success
        return result

    def undo(self, editor: Editor) -> None:
        if self._is_executed:
            path = editor.get_path()
            editor.open(path)
            self._is_executed = False
            logger.info(f"Undid close: reopened '{path}'")


class NewCommand(BaseCommand):
    """
    Creates a new document.

    Undo closes it.
    """

    name = "new"

    def execute(self, editor: Editor) -> CommandResult:
        result = _run_action(self, editor.create_new, "Created new file")
        self._is_executed = result.success
        return result

    def undo(self, editor: Editor) -> None:
        if self._is_executed:
            editor.close()
            self._is_executed = False
            logger.info("Undid new file")


class CloneRepositoryCommand(BaseCommand):
    """
    Clones a repository.

    Undo does nothing.
    """

    name = "clone"

    def __init__(self, repository_url: str):
        """
        Initializes the command.

        Args:
            repository_url: URL of the repository to clone.
        """
        super().__init__()
        self._repository_url = repository_url

    @property
    def repository_url(self) -> str:
        return self._repository_url

    def execute(self, editor: Editor) -> CommandResult:
        result = _run_action(
            self,
            lambda: editor.clone_repository(self._repository_url),
            f"Cloned repository '{self._repository_url}'",
        )
        self._is_executed = result.success
        result.data = {"url": self._repository_url}
        return result

    def undo(self, editor: Editor) -> None:
        logger.debug("Undo of clone is a no-op")

    def describe(self) -> str:
        return f"{self.name} {self._repository_url}"
