# src/todo_repl/cli/render.py

from __future__ import annotations

from collections.abc import Iterable

from ..todos.models import Todo

GREEN = "32"
RED = "31"

LIST_HEADER = "----->Todos<-----"
LIST_FOOTER = "-----------------"


def style(text: str, code: str, *, color: bool) -> str:
    if not color:
        return text
    return f"\033[{code}m{text}\033[0m"


def status_word(completed: bool, *, color: bool = False) -> str:
    if completed:
        return style("Done", GREEN, color=color)
    return style("To do", RED, color=color)


def format_todo(todo: Todo, *, color: bool = False) -> str:
    return f"{todo.id} | {todo.title} | {status_word(todo.completed, color=color)}"


def format_todo_list(todos: Iterable[Todo], *, color: bool = False) -> str:
    items = list(todos)
    lines = [LIST_HEADER, f"Count: {len(items)}"]
    lines.extend(format_todo(t, color=color) for t in items)
    lines.append(LIST_FOOTER)
    return "\n".join(lines)
