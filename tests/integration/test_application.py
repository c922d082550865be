"""
Integration tests for the Application command loop.

These drive the loop with in-memory input and check what reaches the
editor, the history and the output stream.
"""

from unittest.mock import patch

import pytest

from src.app.application import Application
from src.app.constants import EXIT_INTERRUPTED, EXIT_OK
from src.commands.command_history import CommandHistory
from src.commands.editor_commands import CloseCommand, OpenCommand, SaveAsCommand
from src.core.editor_config import DEFAULT_PROMPT


@pytest.mark.integration
@pytest.mark.parametrize(
    "line", ["save", "saveas b.txt", "open a.txt", "print", "close", "new"]
)
def test_recognized_command_pushes_once(make_app, history, line):
    app = make_app()
    cmd = app.dispatch(line)

    assert cmd is not None
    assert cmd.is_executed is True
    assert len(history) == 1
    assert history.peek() is cmd


@pytest.mark.integration
def test_unrecognized_command(make_app, history, output):
    app = make_app()

    assert app.dispatch("foo bar") is None
    assert history.is_empty
    assert output.getvalue() == "Unrecognized command: foo\n"


@pytest.mark.integration
@pytest.mark.parametrize(
    "line, argument", [("saveas", "newpath"), ("open", "filepath")]
)
def test_missing_argument(make_app, history, output, line, argument):
    app = make_app()

    assert app.dispatch(line) is None
    assert history.is_empty
    assert output.getvalue() == f"Missing argument: {argument}\n"


@pytest.mark.integration
def test_blank_line_is_ignored(make_app, history, output):
    app = make_app()

    assert app.dispatch("   \n") is None
    assert history.is_empty
    assert output.getvalue() == ""


@pytest.mark.integration
def test_open_saveas_close_scenario(make_app, editor, history, output):
    app = make_app("open a.txt", "saveas b.txt", "close")
    assert app.run() == EXIT_OK

    commands = list(history)
    assert [type(c) for c in commands] == [OpenCommand, SaveAsCommand, CloseCommand]
    assert editor.get_path() == "b.txt"

    output.truncate(0)
    output.seek(0)

    # Close undo reopens the current path
    close_cmd = history.pop()
    close_cmd.undo(editor)
    assert output.getvalue().splitlines() == ["Opening file b.txt"]

    # SaveAs undo restores the path recorded before it ran
    saveas_cmd = history.pop()
    saveas_cmd.undo(editor)
    assert editor.get_path() == "a.txt"

    # Open undo closes
    open_cmd = history.pop()
    open_cmd.undo(editor)
    assert output.getvalue().splitlines()[-1] == "Closing file"

    assert history.pop() is None


@pytest.mark.integration
def test_run_prints_prompt_and_notifications(make_app, output):
    app = make_app("open a.txt", "print")
    app.run()

    assert output.getvalue().splitlines() == [
        DEFAULT_PROMPT,
        "Opening file a.txt",
        DEFAULT_PROMPT,
        "Printing file",
        DEFAULT_PROMPT,
    ]


@pytest.mark.integration
def test_custom_prompt(make_app, output):
    make_app("save", prompt="> ").run()
    assert output.getvalue().splitlines()[0] == "> "


@pytest.mark.integration
@pytest.mark.parametrize("word", ["exit", "quit", "  exit  "])
def test_exit_stops_loop(make_app, history, word):
    app = make_app("save", word, "print")

    assert app.run() == EXIT_OK
    assert len(history) == 1


@pytest.mark.integration
def test_undo_builtin(make_app, editor, history, output):
    app = make_app("open a.txt", "saveas b.txt", "undo")
    app.run()

    assert editor.get_path() == "a.txt"
    assert len(history) == 1
    assert "Undone: saveas b.txt" in output.getvalue()


@pytest.mark.integration
def test_undo_on_empty_history(make_app, output):
    app = make_app()

    assert app.undo_last() is None
    assert output.getvalue() == "Nothing to undo.\n"


@pytest.mark.integration
def test_builtins_are_not_recorded(make_app, history):
    app = make_app()
    for word in ("history", "help", "undo"):
        assert app.dispatch(word) is None
    assert history.is_empty


@pytest.mark.integration
def test_history_listing(make_app, output):
    app = make_app()
    app.dispatch("history")
    app.dispatch("open a.txt")
    app.dispatch("save")

    output.truncate(0)
    output.seek(0)
    app.dispatch("history")

    assert output.getvalue().splitlines() == ["1. open a.txt", "2. save"]


@pytest.mark.integration
def test_help_lists_commands(make_app, output):
    make_app().dispatch("help")

    text = output.getvalue()
    for usage in ("save", "saveas <newpath>", "open <filepath>", "clone <url>"):
        assert usage in text
    assert "undo" in text
    assert "exit, quit" in text


@pytest.mark.integration
def test_failed_execution_is_not_recorded(make_app, editor, history, output):
    app = make_app()
    with patch.object(editor, "save", side_effect=PermissionError("read-only")):
        assert app.dispatch("save") is None

    assert history.is_empty
    assert output.getvalue() == "Error: read-only\n"


@pytest.mark.integration
def test_bounded_history(editor, output):
    import io

    app = Application(
        editor=editor,
        history=CommandHistory(max_size=2),
        input_stream=io.StringIO("open a.txt\nsave\nprint\n"),
        output=output,
    )
    app.run()

    assert [c.describe() for c in app.history] == ["save", "print"]


@pytest.mark.integration
def test_keyboard_interrupt_returns_130(make_app):
    app = make_app()
    with patch.object(app, "_read_line", side_effect=KeyboardInterrupt):
        assert app.run() == EXIT_INTERRUPTED


@pytest.mark.integration
def test_reads_stdin_when_no_stream(monkeypatch, capsys):
    lines = iter(["new", "exit"])
    monkeypatch.setattr("builtins.input", lambda: next(lines))

    app = Application()
    assert app.run() == EXIT_OK
    assert len(app.history) == 1

    out, _ = capsys.readouterr()
    assert "Creating new file" in out


@pytest.mark.integration
def test_stdin_eof_ends_loop(monkeypatch):
    def raise_eof():
        raise EOFError

    monkeypatch.setattr("builtins.input", raise_eof)

    assert Application().run() == EXIT_OK


@pytest.mark.integration
def test_builtin_with_extra_arguments(make_app, editor, history, output):
    app = make_app()
    app.dispatch("open a.txt")
    app.dispatch("saveas b.txt")

    assert app.dispatch("undo 2") is None
    assert editor.get_path() == "a.txt"
    assert len(history) == 1

    app.dispatch("history all")
    app.dispatch("help me")

    text = output.getvalue()
    assert "Unrecognized command" not in text
    assert "1. open a.txt" in text
    assert "Commands:" in text


@pytest.mark.integration
def test_exit_with_extra_arguments(make_app, history):
    app = make_app("save", "quit now", "print")

    assert app.run() == EXIT_OK
    assert len(history) == 1
