"""
Tests for the CommandHistory stack.
"""

import pytest

from src.commands.command_history import CommandHistory
from src.commands.editor_commands import CloseCommand, OpenCommand, SaveCommand


@pytest.mark.unit
class TestCommandHistory:
    """Tests for push/pop ordering, bounds and clearing."""

    def test_pop_returns_reverse_push_order(self, history):
        c1, c2, c3 = SaveCommand(), OpenCommand("a.txt"), CloseCommand()
        history.push(c1)
        history.push(c2)
        history.push(c3)

        assert history.pop() is c3
        assert history.pop() is c2
        assert history.pop() is c1

    def test_pop_empty_returns_none(self, history):
        assert history.pop() is None
        assert history.peek() is None
        assert history.is_empty is True

    def test_peek_does_not_remove(self, history):
        cmd = SaveCommand()
        history.push(cmd)

        assert history.peek() is cmd
        assert len(history) == 1

    def test_iteration_is_oldest_first(self, history):
        commands = [SaveCommand(), OpenCommand("a.txt"), CloseCommand()]
        for cmd in commands:
            history.push(cmd)

        assert list(history) == commands

    def test_clear(self, history):
        history.push(SaveCommand())
        history.push(SaveCommand())
        history.clear()

        assert len(history) == 0
        assert history.pop() is None

    def test_max_size_drops_oldest(self):
        history = CommandHistory(max_size=2)
        c1, c2, c3 = SaveCommand(), OpenCommand("a.txt"), CloseCommand()
        for cmd in (c1, c2, c3):
            history.push(cmd)

        assert len(history) == 2
        assert list(history) == [c2, c3]

    @pytest.mark.parametrize("size", [0, -1])
    def test_invalid_max_size(self, size):
        with pytest.raises(ValueError):
            CommandHistory(max_size=size)
