# src/todo_repl/cli/dispatcher.py

"""
The REPL loop: read a line, parse it, run it against the store, print the outcome.

Read errors (EOFError, KeyboardInterrupt) are not handled here; they propagate
to the entry point, which decides how to exit.
"""

from __future__ import annotations

import logging

from ..core.ports import Console
from ..core.state import AppState
from ..todos.store import TodoNotFoundError
from .commands import Command, CommandKind, CommandParseError, build_help, parse_command
from .render import GREEN, format_todo, format_todo_list, style

logger = logging.getLogger(__name__)

COMMAND_PROMPT = "Enter a command: "
ADD_PROMPT = "Enter a new todo item (or press Enter to finish):"
EDIT_PROMPT = "Enter the new title:"
NOT_FOUND = "Todo not found!"


class Dispatcher:
    def __init__(self, state: AppState, console: Console) -> None:
        self.state = state
        self.console = console
        self.running = False

    @property
    def color(self) -> bool:
        return bool(getattr(self.state.settings, "color", False))

    @property
    def strict_ids(self) -> bool:
        return bool(getattr(self.state.settings, "strict_ids", False))

    def run(self) -> None:
        logger.info("Dispatcher started (next_id=%s).", self.state.store.next_id)
        self.console.write(build_help())
        self.running = True

        while self.running:
            self.console.write(COMMAND_PROMPT)
            line = self.console.read_line()
            self.handle_line(line)

        logger.info("Dispatcher finished.")

    def handle_line(self, line: str) -> bool:
        """Parse and execute one line. Returns False once the loop should stop."""
        try:
            command = parse_command(line)
        except CommandParseError as e:
            # Malformed ids are silently ignored unless strict_ids is on.
            logger.debug("Ignoring command with malformed id: %s", e)
            if self.strict_ids:
                self.console.write(f"Invalid id: {e.token!r}")
            return True

        self.running = self.execute(command)
        return self.running

    def execute(self, command: Command) -> bool:
        kind = command.kind
        logger.debug("Executing %s id=%s", kind, command.todo_id)

        if kind is CommandKind.QUIT:
            return False

        if kind is CommandKind.ADD:
            self._add()
        elif kind is CommandKind.LIST:
            self.console.write(format_todo_list(self.state.store.list(), color=self.color))
        elif kind is CommandKind.CLEAR:
            self.console.clear()
        elif kind in (CommandKind.COMPLETE, CommandKind.EDIT, CommandKind.DELETE):
            if command.todo_id is None:
                self.console.write(f"Please provide an ID (e.g., {command.word} 3)")
            else:
                self._run_id_command(kind, command.todo_id)
        else:
            self.console.write(build_help())

        return True

    # ---- individual commands ----

    def _add(self) -> None:
        store = self.state.store
        counter = 0
        while True:
            self.console.write(ADD_PROMPT)
            title = self.console.read_line().strip()
            if not title:
                break
            store.create(title)
            counter += 1
            self.console.write(style("Added", GREEN, color=self.color))
        self.console.write(f"Added {counter} todo items.")

    def _run_id_command(self, kind: CommandKind, todo_id: int) -> None:
        store = self.state.store
        try:
            if kind is CommandKind.COMPLETE:
                todo = store.complete(todo_id)
            elif kind is CommandKind.DELETE:
                todo = store.delete(todo_id)
            else:
                self.console.write(EDIT_PROMPT)
                new_title = self.console.read_line().strip()
                todo = store.edit(todo_id, new_title)
        except TodoNotFoundError as e:
            logger.debug("%s failed: %s", kind, e)
            self.console.write(NOT_FOUND)
            return

        self.console.write(format_todo(todo, color=self.color))
