"""
Commands Package.

This package contains the command classes implementing the Command pattern
for the editor, the result type they return, and the history stack used
for undo.
"""
