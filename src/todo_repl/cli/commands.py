# src/todo_repl/cli/commands.py

"""
Command grammar for the todo REPL.

Parsing is kept apart from execution: `parse_command` turns one raw line into a
`Command` value and never touches the store.

Rules:
- the line is trimmed, matching is case-sensitive
- the id argument is everything after the first space following the command word
- unknown words (and known words with unexpected arguments) mean HELP
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

from ..todos.models import MAX_TODO_ID

_ID_RE = re.compile(r"\+?[0-9]+")


class CommandKind(StrEnum):
    ADD = "add"
    LIST = "list"
    COMPLETE = "complete"
    EDIT = "edit"
    DELETE = "delete"
    QUIT = "quit"
    CLEAR = "clear"
    HELP = "help"


@dataclass(frozen=True, slots=True)
class Command:
    kind: CommandKind
    # None for commands without an argument, and for bare id-commands (usage hint).
    todo_id: int | None = None
    # The command word as typed (e.g. "c" or "complete"), used in usage hints.
    word: str = ""


class CommandParseError(ValueError):
    """The id argument of a command is not a valid todo id."""

    def __init__(self, word: str, token: str) -> None:
        super().__init__(f"invalid id for {word!r}: {token!r}")
        self.word = word
        self.token = token


@dataclass(frozen=True, slots=True)
class _Spec:
    kind: CommandKind
    name: str
    help_text: str
    takes_id: bool


class CommandRegistry:
    """Command words (names + aliases) mapped to command kinds."""

    def __init__(self) -> None:
        self._specs: dict[str, _Spec] = {}
        self._order: list[_Spec] = []

    def register(
        self,
        kind: CommandKind,
        help_text: str,
        aliases: list[str] | None = None,
        *,
        name: str | None = None,
        takes_id: bool = False,
    ) -> None:
        spec = _Spec(kind=kind, name=name or kind.value, help_text=help_text, takes_id=takes_id)
        self._order.append(spec)
        for word in [spec.name, *(aliases or [])]:
            self._specs[word] = spec

    def parse(self, line: str) -> Command:
        """
        Parse a raw input line.

        Raises CommandParseError when an id-command carries a malformed id.
        """
        text = line.strip()
        word, sep, rest = text.partition(" ")

        spec = self._specs.get(word)
        if spec is None:
            return Command(CommandKind.HELP, word=word)

        if not sep:
            return Command(spec.kind, word=word)

        if not spec.takes_id:
            return Command(CommandKind.HELP, word=word)

        return Command(spec.kind, todo_id=parse_todo_id(word, rest), word=word)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for spec in self._order:
            usage = f"{spec.name} <id>" if spec.takes_id else spec.name
            lines.append(f"  {usage:<15} - {spec.help_text}")
        return "\n".join(lines)


def parse_todo_id(word: str, token: str) -> int:
    if not _ID_RE.fullmatch(token):
        raise CommandParseError(word, token)
    value = int(token)
    if value > MAX_TODO_ID:
        raise CommandParseError(word, token)
    return value


registry = CommandRegistry()

registry.register(CommandKind.ADD, "Add new todos (empty line to finish)", aliases=["a"])
registry.register(CommandKind.LIST, "List all todos", aliases=["ls"])
registry.register(CommandKind.EDIT, "Edit a todo's title", aliases=["e"], takes_id=True)
registry.register(CommandKind.COMPLETE, "Mark a todo as complete", aliases=["c"], takes_id=True)
registry.register(CommandKind.DELETE, "Delete a todo", aliases=["d"], takes_id=True)
registry.register(CommandKind.CLEAR, "Clear the screen", aliases=["cls"])
registry.register(CommandKind.HELP, "Show this help message", aliases=["h"])
registry.register(CommandKind.QUIT, "Quit", aliases=["q"])


def parse_command(line: str) -> Command:
    return registry.parse(line)


def build_help() -> str:
    return registry.build_help()
