# src/todo_repl/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing here is required: every variable has a default.
- Invalid values fall back to defaults instead of failing at import time.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from .todos.models import MAX_TODO_ID

ENV_PREFIX = "TODO"


def load_local_dotenv() -> None:
    """Load .env from the working directory (or its parents). Existing environment wins."""
    load_dotenv(find_dotenv(usecwd=True), override=False)


load_local_dotenv()


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str) -> Optional[Path]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


def _default_color() -> bool:
    if os.getenv("NO_COLOR") is not None:
        return False
    try:
        return sys.stdout.isatty()
    except Exception:
        return False


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_file: Optional[Path]

    # ---- Store ----
    start_id: int

    # ---- Console ----
    color: bool
    strict_ids: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo").strip() or "todo"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"
        log_file = _env_path(_k("LOG_FILE"))

        start_id = _env_int(_k("START_ID"), 0)
        if start_id < 0 or start_id > MAX_TODO_ID:
            start_id = 0

        color = _env_bool(_k("COLOR"), _default_color())
        strict_ids = _env_bool(_k("STRICT_IDS"), False)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_file=log_file,
            start_id=start_id,
            color=color,
            strict_ids=strict_ids,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
