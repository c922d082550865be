import io
import pathlib
import sys

import pytest

# Ensure project root is in sys.path
repo_root = pathlib.Path(__file__).parent.parent
sys.path.insert(0, str(repo_root))


@pytest.fixture
def output():
    """
    In-memory stream collecting everything the editor and loop print.
    """
    return io.StringIO()


@pytest.fixture
def editor(output):
    """
    Provides a fresh editor writing its notifications to `output`.
    """
    from src.core.editor import Editor

    return Editor(output=output)


@pytest.fixture
def history():
    from src.commands.command_history import CommandHistory

    return CommandHistory()


@pytest.fixture
def make_app(editor, history, output):
    """
    Factory building an Application fed from the given input lines.
    """
    from src.app.application import Application

    def _make(*lines, **kwargs):
        text = "".join(f"{line}\n" for line in lines)
        return Application(
            editor=editor,
            history=history,
            input_stream=io.StringIO(text),
            output=output,
            **kwargs,
        )

    return _make
