# src/todo_repl/todos/models.py

from __future__ import annotations

from dataclasses import dataclass, replace

# Ids must fit an unsigned 64-bit integer.
MAX_TODO_ID = 2**64 - 1


@dataclass(frozen=True, slots=True)
class Todo:
    """
    A single todo entry.

    Notes:
    - `id` is assigned by TodoStore and never changes.
    - `completed` only ever goes from False to True.
    - instances are immutable; updates produce a new Todo that the store swaps in.
    """

    id: int
    title: str
    completed: bool = False

    def completed_copy(self) -> Todo:
        return replace(self, completed=True)

    def with_title(self, new_title: str) -> Todo:
        return replace(self, title=new_title)
