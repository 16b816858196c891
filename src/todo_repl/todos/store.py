# src/todo_repl/todos/store.py

from __future__ import annotations

import logging

from .models import MAX_TODO_ID, Todo

logger = logging.getLogger(__name__)


class TodoNotFoundError(LookupError):
    """Raised when no todo matches the requested id."""

    def __init__(self, todo_id: int) -> None:
        super().__init__(f"todo {todo_id} not found")
        self.todo_id = todo_id


class TodoStore:
    """
    In-memory todo store.

    - ids come from a counter that only moves forward (deleted ids are never reused)
    - items keep creation order; edit/complete replace the item at the same position
    - lookups are a linear scan, the list is expected to stay small
    - Todo is frozen, so items handed out by list()/edit()/complete() cannot change the store
    """

    def __init__(self, next_id: int = 0) -> None:
        if next_id < 0 or next_id > MAX_TODO_ID:
            raise ValueError(f"next_id must be between 0 and {MAX_TODO_ID}")
        self._next_id = next_id
        self._items: list[Todo] = []
        logger.debug("TodoStore ready next_id=%s", next_id)

    def __len__(self) -> int:
        return len(self._items)

    @property
    def next_id(self) -> int:
        return self._next_id

    # ---- low-level helpers ----

    def _index(self, todo_id: int) -> int:
        for pos, todo in enumerate(self._items):
            if todo.id == todo_id:
                return pos
        raise TodoNotFoundError(todo_id)

    # ---- public API ----

    def create(self, title: str) -> int:
        todo_id = self._next_id
        self._next_id += 1
        self._items.append(Todo(id=todo_id, title=title))
        logger.debug("Created todo id=%s", todo_id)
        return todo_id

    def list(self) -> tuple[Todo, ...]:
        return tuple(self._items)

    def edit(self, todo_id: int, new_title: str) -> Todo:
        pos = self._index(todo_id)
        todo = self._items[pos] = self._items[pos].with_title(new_title)
        logger.debug("Edited todo id=%s", todo_id)
        return todo

    def complete(self, todo_id: int) -> Todo:
        pos = self._index(todo_id)
        todo = self._items[pos] = self._items[pos].completed_copy()
        logger.debug("Completed todo id=%s", todo_id)
        return todo

    def delete(self, todo_id: int) -> Todo:
        todo = self._items.pop(self._index(todo_id))
        logger.debug("Deleted todo id=%s", todo_id)
        return todo
