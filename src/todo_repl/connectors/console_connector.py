# src/todo_repl/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from typing import TextIO

logger = logging.getLogger(__name__)

# ESC[2J clears the screen, ESC[H moves the cursor home.
CLEAR_SEQUENCE = "\033[2J\033[H"


class TerminalConsole:
    """Console port backed by stdin/stdout."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out

    @property
    def out(self) -> TextIO:
        # Resolved lazily so pytest's capsys replacement of sys.stdout is honored.
        return self._out if self._out is not None else sys.stdout

    def read_line(self) -> str:
        return input()

    def write(self, text: str = "") -> None:
        print(text, file=self.out, flush=True)

    def clear(self) -> None:
        try:
            self.out.write(CLEAR_SEQUENCE)
            self.out.flush()
        except OSError:
            logger.debug("Screen clear failed.", exc_info=True)
