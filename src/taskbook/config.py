# src/taskbook/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Malformed values fall back to defaults instead of failing at import time.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKBOOK"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

# Real environment variables win over .env entries.
load_dotenv(override=False)


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
    log_to_file: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path

    # ---- Store ----
    thread_safe: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskbook").strip() or "taskbook"

        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper()
        if log_level not in _LOG_LEVELS:
            log_level = "INFO"

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_to_file=_env_bool(_k("LOG_TO_FILE"), False),
            data_dir=_env_path(_k("DATA_DIR"), Path(".local/taskbook")),
            thread_safe=_env_bool(_k("THREAD_SAFE"), False),
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
