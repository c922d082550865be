"""
Editor Module.

Defines the Editor receiver. Commands delegate their actions to it.
Operations are placeholders: each writes a notification line to the
editor's output stream and performs no file I/O.
"""

import logging
from typing import Optional, TextIO

logger = logging.getLogger(__name__)


class Editor:
    """
    Text editor receiver.

    Holds the current document path. The content field is declared for
    completeness but no operation reads or writes it.

    Attributes:
        path (str): Path of the current document.
        content (str): Document content (unused).
    """

    def __init__(self, path: str = "", output: Optional[TextIO] = None):
        """
        Initializes the editor.

        Args:
            path: Initial document path.
            output: Stream receiving notifications. Defaults to the
                current sys.stdout at the time of each notification.
        """
        self.path = path
        self.content = ""
        self._output = output

    def _notify(self, message: str) -> None:
        print(message, file=self._output)
        logger.debug(f"Editor: {message}")

    def save(self) -> None:
        """Saves the current document."""
        self._notify("Saving file")

    def save_as(self, new_path: str) -> None:
        """
        Saves the current document under a new path.

        Args:
            new_path: Target path; becomes the current path.
        """
        self._notify(f"Saving file as {new_path}")
        self.path = new_path

    def open(self, path: str) -> None:
        """
        Opens a document.

        Args:
            path: Path of the document; becomes the current path.
        """
        self._notify(f"Opening file {path}")
        self.path = path

    def print_file(self) -> None:
        """Prints the current document."""
        self._notify("Printing file")

    def close(self) -> None:
        """Closes the current document. The path is kept."""
        self._notify("Closing file")

    def revert(self) -> None:
        """Reverts the last change to the document."""
        self._notify("Reverting last change")

    def create_new(self) -> None:
        """Creates a new empty document."""
        self._notify("Creating new file")

    def clone_repository(self, repository_url: str) -> None:
        """
        Clones a repository into the workspace.

        Args:
            repository_url: URL of the repository.
        """
        self._notify(f"Cloning repository {repository_url}")

    def set_path(self, path: str) -> None:
        self.path = path

    def get_path(self) -> str:
        return self.path
