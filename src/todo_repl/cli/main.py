# src/todo_repl/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the REPL on the terminal.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..connectors.console_connector import TerminalConsole
from ..logging_setup import setup_logging
from .bootstrap import create_initial_state
from .dispatcher import Dispatcher

logger = logging.getLogger(__name__)


EXIT_OK = 0
EXIT_INPUT_CLOSED = 1
EXIT_INTERRUPTED = 130


def main() -> int:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(console_level=console_level, log_file=settings.log_file)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)
    console = TerminalConsole()

    # Read failures end the session with a non-zero status; only quit exits cleanly.
    try:
        Dispatcher(state, console).run()
    except EOFError:
        logger.info("Console EOF received, exiting.")
        console.write()
        return EXIT_INPUT_CLOSED
    except KeyboardInterrupt:
        logger.info("Console KeyboardInterrupt, exiting.")
        console.write()
        return EXIT_INTERRUPTED

    logger.info("Bye.")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
