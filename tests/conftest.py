# tests/conftest.py

from __future__ import annotations

import logging
from types import SimpleNamespace

import pytest

from todo_repl.core.state import AppState
from todo_repl.todos.store import TodoStore

from .fakes import FakeConsole


@pytest.fixture()
def settings() -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the dispatcher.

    A SimpleNamespace keeps tests independent of the process environment.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="WARNING",
        log_file=None,
        start_id=0,
        color=False,
        strict_ids=False,
    )


@pytest.fixture()
def store() -> TodoStore:
    return TodoStore()


@pytest.fixture()
def state(settings: SimpleNamespace, store: TodoStore) -> AppState:
    return AppState(settings=settings, store=store)


@pytest.fixture()
def console() -> FakeConsole:
    return FakeConsole()


@pytest.fixture()
def root_logger():
    """Undo setup_logging(): drop the handlers it installed and restore the root level."""
    root = logging.getLogger()
    level = root.level
    yield root
    for h in list(root.handlers):
        if type(h) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
    logging.captureWarnings(False)
