"""
Command Dispatcher.

Turns a line of user input into a command object. Command names map to
factories in a CommandRegistry, so new commands are added by registering
them rather than by editing the dispatch logic.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from src.commands.base_command import BaseCommand
from src.commands.editor_commands import (
    CloneRepositoryCommand,
    CloseCommand,
    NewCommand,
    OpenCommand,
    PrintCommand,
    SaveAsCommand,
    SaveCommand,
)
from src.core.editor import Editor

logger = logging.getLogger(__name__)

CommandFactory = Callable[[Editor, Sequence[str]], BaseCommand]


class CommandParseError(ValueError):
    """Raised when an input line cannot be turned into a command."""


class EmptyInputError(CommandParseError):
    """Raised for blank input lines."""

    def __init__(self):
        super().__init__("Empty input")


class UnknownCommandError(CommandParseError):
    """Raised when the command name is not registered."""

    def __init__(self, name: str):
        super().__init__(f"Unrecognized command: {name}")
        self.name = name


class MissingArgumentError(CommandParseError):
    """Raised when a required argument is not supplied."""

    def __init__(self, command: str, argument: str):
        super().__init__(f"Missing argument: {argument}")
        self.command = command
        self.argument = argument


@dataclass
class CommandSpec:
    """
    Registration entry for a command.

    Attributes:
        name: Word typed by the user.
        factory: Builds the command from the editor and validated arguments.
        required_args: Names of the positional arguments the command needs.
        help: One-line description for the help listing.
    """

    name: str
    factory: CommandFactory
    required_args: Tuple[str, ...] = ()
    help: str = ""

    @property
    def usage(self) -> str:
        return " ".join([self.name] + [f"<{arg}>" for arg in self.required_args])


@dataclass
class CommandRegistry:
    specs: Dict[str, CommandSpec] = field(default_factory=dict)

    def register(self, spec: CommandSpec) -> None:
        if not spec.name or any(c.isspace() for c in spec.name):
            raise ValueError(f"Invalid command name: {spec.name!r}")
        if spec.name in self.specs:
            logger.warning(f"Replacing registered command: {spec.name}")
        self.specs[spec.name] = spec

    def get(self, name: str) -> CommandSpec:
        if name not in self.specs:
            raise UnknownCommandError(name)
        return self.specs[name]

    def names(self) -> List[str]:
        return list(self.specs)

    def __contains__(self, name: object) -> bool:
        return name in self.specs


def tokenize_input(line: str) -> List[str]:
    """
    Splits an input line on whitespace.

    Args:
        line: Raw input line.

    Returns:
        List[str]: Tokens, empty for a blank line.
    """
    return line.split()


def build_default_registry() -> CommandRegistry:
    """
    Creates a registry holding the standard editor commands.

    Returns:
        CommandRegistry: Registry with save, saveas, open, print, close,
        new and clone.
    """
    registry = CommandRegistry()
    registry.register(
        CommandSpec("save", lambda editor, args: SaveCommand(), help="Save the file")
    )
    registry.register(
        CommandSpec(
            "saveas",
            lambda editor, args: SaveAsCommand.for_editor(editor, args[0]),
            required_args=("newpath",),
            help="Save the file under a new path",
        )
    )
    registry.register(
        CommandSpec(
            "open",
            lambda editor, args: OpenCommand(args[0]),
            required_args=("filepath",),
            help="Open a file",
        )
    )
    registry.register(
        CommandSpec("print", lambda editor, args: PrintCommand(), help="Print the file")
    )
    registry.register(
        CommandSpec("close", lambda editor, args: CloseCommand(), help="Close the file")
    )
    registry.register(
        CommandSpec("new", lambda editor, args: NewCommand(), help="Create a new file")
    )
    registry.register(
        CommandSpec(
            "clone",
            lambda editor, args: CloneRepositoryCommand(args[0]),
            required_args=("url",),
            help="Clone a repository",
        )
    )
    return registry


class CommandDispatcher:
    """
    Parses input lines into commands bound to one editor.
    """

    def __init__(self, editor: Editor, registry: Optional[CommandRegistry] = None):
        """
        Args:
            editor: Editor the commands will capture state from.
            registry: Available commands. Defaults to build_default_registry().
        """
        self.editor = editor
        self.registry = registry if registry is not None else build_default_registry()

    def parse(self, line: str) -> BaseCommand:
        """
        Builds the command named by the first token of the line.

        Args:
            line: Raw input line.

        Returns:
            BaseCommand: The constructed, not yet executed, command.

        Raises:
            EmptyInputError: If the line holds no tokens.
            UnknownCommandError: If the name is not registered.
            MissingArgumentError: If a required argument is absent.
        """
        tokens = tokenize_input(line)
        if not tokens:
            raise EmptyInputError()

        name, args = tokens[0], tokens[1:]
        spec = self.registry.get(name)

        if len(args) < len(spec.required_args):
            raise MissingArgumentError(name, spec.required_args[len(args)])
        if len(args) > len(spec.required_args):
            logger.debug(
                f"Ignoring extra arguments for {name}: {args[len(spec.required_args):]}"
            )

        command = spec.factory(self.editor, args)
        logger.debug(f"Parsed command: {command.__class__.__name__}")
        return command
