"""
Command Editor Launcher.
Entry point that runs the editor CLI from the repository root.
"""

import os
import sys

sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from src.cli.editor import main  # noqa: E402

if __name__ == "__main__":
    main()
