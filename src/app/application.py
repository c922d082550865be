"""
Application Module.

The Application is the sender: it reads lines of input, asks the
dispatcher for the matching command, executes it against the editor and
records it in the history for undo.

Besides editor commands, the loop understands a few built-in words that
are never recorded: undo, history, help, exit and quit.
"""

import logging
from typing import Optional, TextIO

from src.app.command_dispatcher import (
    CommandDispatcher,
    CommandRegistry,
    EmptyInputError,
    MissingArgumentError,
    UnknownCommandError,
    tokenize_input,
)
from src.app.constants import (
    BUILTIN_WORDS,
    EXIT_INTERRUPTED,
    EXIT_OK,
    EXIT_WORDS,
    HELP_WORD,
    HISTORY_WORD,
    STATUS_ERROR_PREFIX,
    STATUS_HISTORY_EMPTY,
    STATUS_NOTHING_TO_UNDO,
    STATUS_UNDONE_PREFIX,
    UNDO_WORD,
)
from src.commands.base_command import BaseCommand
from src.commands.command_history import CommandHistory
from src.core.editor import Editor
from src.core.editor_config import DEFAULT_PROMPT

logger = logging.getLogger(__name__)


class Application:
    """
    Interactive command loop.

    Attributes:
        editor (Editor): The receiver shared by all commands.
        history (CommandHistory): Executed commands, most recent last.
        dispatcher (CommandDispatcher): Input line parser.
    """

    def __init__(
        self,
        editor: Optional[Editor] = None,
        history: Optional[CommandHistory] = None,
        registry: Optional[CommandRegistry] = None,
        input_stream: Optional[TextIO] = None,
        output: Optional[TextIO] = None,
        prompt: str = DEFAULT_PROMPT,
    ):
        """
        Initializes the application.

        Args:
            editor: Receiver. A new Editor writing to output is created if omitted.
            history: Command history. Unbounded if omitted.
            registry: Available commands. Defaults to the standard set.
            input_stream: Source of input lines. None reads with input().
            output: Stream for messages. None means sys.stdout.
            prompt: Text shown before each input line.
        """
        self.output = output
        self.editor = editor if editor is not None else Editor(output=output)
        self.history = history if history is not None else CommandHistory()
        self.dispatcher = CommandDispatcher(self.editor, registry)
        self.input_stream = input_stream
        self.prompt = prompt
        self._running = False

    def _write(self, message: str) -> None:
        print(message, file=self.output)

    def _read_line(self) -> Optional[str]:
        """Returns the next input line, or None at end of input."""
        if self.input_stream is None:
            try:
                return input()
            except EOFError:
                return None
        line = self.input_stream.readline()
        if line == "":
            return None
        return line

    def run(self) -> int:
        """
        Runs the loop until exit, quit or end of input.

        Returns:
            int: Exit code (0 on normal exit, 130 on interrupt).
        """
        self._running = True
        logger.info("Command loop started")
        try:
            while self._running:
                self._write(self.prompt)
                line = self._read_line()
                if line is None:
                    logger.info("End of input reached")
                    break
                self.dispatch(line)
        except KeyboardInterrupt:
            self._write("")
            logger.info("Command loop interrupted")
            return EXIT_INTERRUPTED
        finally:
            self._running = False

        logger.info(f"Command loop finished, {len(self.history)} command(s) in history")
        return EXIT_OK

    def stop(self) -> None:
        """Ends the loop after the current line."""
        self._running = False

    def dispatch(self, line: str) -> Optional[BaseCommand]:
        """
        Handles one line of input.

        Args:
            line: Raw input line.

        Returns:
            Optional[BaseCommand]: The executed and recorded command, or
            None if the line was a built-in, invalid, or failed to execute.
        """
        tokens = tokenize_input(line)
        word = tokens[0] if tokens else ""
        if word in BUILTIN_WORDS and tokens[1:]:
            logger.debug(f"Ignoring extra arguments for {word}: {tokens[1:]}")

        if word in EXIT_WORDS:
            logger.info("Exit requested")
            self.stop()
            return None
        if word == UNDO_WORD:
            self.undo_last()
            return None
        if word == HISTORY_WORD:
            self.show_history()
            return None
        if word == HELP_WORD:
            self.show_help()
            return None

        try:
            command = self.dispatcher.parse(line)
        except EmptyInputError:
            return None
        except UnknownCommandError as e:
            logger.info(f"Rejected input: {line.strip()!r}")
            self._write(str(e))
            return None
        except MissingArgumentError as e:
            logger.info(f"Rejected {e.command}: missing {e.argument}")
            self._write(str(e))
            return None

        return self.execute(command)

    def execute(self, command: BaseCommand) -> Optional[BaseCommand]:
        """
        Executes a command and records it if it succeeded.

        Args:
            command: Command to run against the editor.

        Returns:
            Optional[BaseCommand]: The command if it was recorded, else None.
        """
        result = command.execute(self.editor)
        if not result.success:
            logger.error(
                f"Command failed, not recorded: {result.errors or result.message}"
            )
            self._write(f"{STATUS_ERROR_PREFIX}{result.message}")
            return None

        self.history.push(command)
        return command

    def undo_last(self) -> Optional[BaseCommand]:
        """
        Pops the most recent command and reverts it.

        Returns:
            Optional[BaseCommand]: The undone command, or None if the
            history was empty.
        """
        command = self.history.pop()
        if command is None:
            self._write(STATUS_NOTHING_TO_UNDO)
            return None

        command.undo(self.editor)
        self._write(f"{STATUS_UNDONE_PREFIX}{command.describe()}")
        return command

    def show_history(self) -> None:
        """Lists recorded commands, oldest first."""
        if self.history.is_empty:
            self._write(STATUS_HISTORY_EMPTY)
            return
        for index, command in enumerate(self.history, start=1):
            self._write(f"{index}. {command.describe()}")

    def show_help(self) -> None:
        """Lists available commands and built-ins."""
        self._write("Commands:")
        for spec in self.dispatcher.registry.specs.values():
            self._write(f"  {spec.usage:<20} {spec.help}")
        self._write(f"  {UNDO_WORD:<20} Undo the last command")
        self._write(f"  {HISTORY_WORD:<20} Show executed commands")
        self._write(f"  {'exit, quit':<20} Leave the editor")
