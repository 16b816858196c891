# src/todo_repl/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..todos.store import TodoStore


@dataclass
class AppState:
    # Settings object (config.Settings or a test stand-in with the same fields).
    settings: object

    store: TodoStore
