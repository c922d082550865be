"""
Application Constants.
Stores the built-in command words, user-facing messages and exit codes.
"""

# Built-in words handled by the loop itself (never recorded in history)
EXIT_WORDS = frozenset({"exit", "quit"})
UNDO_WORD = "undo"
HISTORY_WORD = "history"
HELP_WORD = "help"
BUILTIN_WORDS = EXIT_WORDS | {UNDO_WORD, HISTORY_WORD, HELP_WORD}

# Status Messages
STATUS_ERROR_PREFIX = "Error: "
STATUS_NOTHING_TO_UNDO = "Nothing to undo."
STATUS_HISTORY_EMPTY = "History is empty."
STATUS_UNDONE_PREFIX = "Undone: "

# Exit Codes
EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130
