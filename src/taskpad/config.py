# src/taskpad/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Nothing required at import time; every variable has a default.

Variables (prefix TASKPAD_):
  APP_NAME             display name (default: taskpad)
  LOG_LEVEL            console log level (default: INFO)
  LOG_FILE             optional debug log file (default: unset, console only)
  CONSOLE_ENABLED      run the console front end (default: true)
  SEED_EXAMPLES        start with the three sample tasks (default: true)
  ID_SEED              first id handed out by the store (default: one past the highest seeded id)
  PLACEHOLDER_NAME     name used by "/add" without arguments (default: New Task)
  PLACEHOLDER_DETAILS  details used by "/add" without arguments (default: Add Details Here)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKPAD"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_optional_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def _env_optional_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_file: Path | None

    # ---- Front end ----
    console_enabled: bool
    placeholder_name: str
    placeholder_details: str

    # ---- Task store ----
    seed_examples: bool
    id_seed: int | None

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskpad").strip() or "taskpad"
        log_level = _env(_k("LOG_LEVEL"), "INFO")
        log_file = _env_optional_path(_k("LOG_FILE"))

        console_enabled = _env_bool(_k("CONSOLE_ENABLED"), True)
        placeholder_name = _env(_k("PLACEHOLDER_NAME"), "New Task")
        placeholder_details = _env(_k("PLACEHOLDER_DETAILS"), "Add Details Here")

        seed_examples = _env_bool(_k("SEED_EXAMPLES"), True)
        id_seed = _env_optional_int(_k("ID_SEED"))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_file=log_file,
            console_enabled=console_enabled,
            placeholder_name=placeholder_name,
            placeholder_details=placeholder_details,
            seed_examples=seed_examples,
            id_seed=id_seed,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
