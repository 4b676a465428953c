# src/priority_todo/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Bad values never break startup: every knob falls back to its default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"

DEFAULT_INITIAL_CAPACITY = 10
DEFAULT_NAME_MAX_LENGTH = 99
DEFAULT_SEPARATOR_SUBSTITUTE = ";"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_int(name: str, default: int, *, minimum: int = 0) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value >= minimum else default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local paths ----
    data_dir: Path
    lists_dir: Path

    # ---- Store tuning ----
    initial_capacity: int
    max_capacity: int | None
    name_max_length: int
    separator_substitute: str

    @staticmethod
    def from_env() -> Settings:
        app_name = _env(_k("APP_NAME"), "priority-todo").strip() or "priority-todo"
        log_level = _env(_k("LOG_LEVEL"), "WARNING")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/priority_todo"))
        lists_dir = _env_path(_k("LISTS_DIR"), Path("."))

        initial_capacity = _env_int(
            _k("INITIAL_CAPACITY"), DEFAULT_INITIAL_CAPACITY, minimum=1
        )
        # 0 means "no ceiling".
        max_capacity = _env_int(_k("MAX_CAPACITY"), 0) or None
        name_max_length = _env_int(_k("NAME_MAX_LENGTH"), DEFAULT_NAME_MAX_LENGTH, minimum=1)

        substitute = _env(_k("SEPARATOR_SUBSTITUTE"), DEFAULT_SEPARATOR_SUBSTITUTE)
        # A single, comma-free character keeps the file format intact.
        if len(substitute) != 1 or substitute in (",", "\n"):
            substitute = DEFAULT_SEPARATOR_SUBSTITUTE

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            lists_dir=lists_dir,
            initial_capacity=initial_capacity,
            max_capacity=max_capacity,
            name_max_length=name_max_length,
            separator_substitute=substitute,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
