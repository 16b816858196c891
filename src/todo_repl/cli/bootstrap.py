# src/todo_repl/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it takes the settings and wires a
fresh TodoStore into AppState. Nothing else constructs the store.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..todos.store import TodoStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    start_id = int(getattr(settings, "start_id", 0))
    state = AppState(settings=settings, store=TodoStore(next_id=start_id))
    logger.debug("Initial state created (start_id=%s).", start_id)
    return state
