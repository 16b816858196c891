# src/todo_repl/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the dispatcher.

The dispatcher talks to a Console instead of stdin/stdout directly.
This keeps the terminal swappable and makes the REPL testable with scripted input.
"""

from typing import Protocol


class Console(Protocol):
    """Line-oriented terminal: blocking reads, plain writes, screen clear."""

    def read_line(self) -> str:
        """Read one line (without trailing newline). Raises EOFError when input is closed."""
        ...

    def write(self, text: str = "") -> None: ...
    def clear(self) -> None: ...
