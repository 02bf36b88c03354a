# src/tasklist/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is read from disk except the optional .env file.
- Tests build their own settings objects instead of touching the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKLIST"

DEFAULT_SEED_TASKS: tuple[str, ...] = (
    "Buy groceries",
    "Walk the dog",
    "Finish lab report",
    "Call mom",
)


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


def _env_list(name: str, default: tuple[str, ...], sep: str = ";") -> tuple[str, ...]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return tuple(default)
    return tuple(p.strip() for p in raw.split(sep) if p.strip())


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
    data_dir: Path

    # ---- Demo content ----
    seed_demo: bool
    seed_tasks: tuple[str, ...]

    # ---- Console ----
    console_timestamps: bool

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            app_name=_env(_k("APP_NAME"), "tasklist").strip() or "tasklist",
            log_level=_env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING",
            data_dir=_env_path(_k("DATA_DIR"), Path(".local/tasklist")),
            seed_demo=_env_bool(_k("SEED_DEMO"), False),
            seed_tasks=_env_list(_k("SEED_TASKS"), DEFAULT_SEED_TASKS),
            console_timestamps=_env_bool(_k("CONSOLE_TIMESTAMPS"), True),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    load_dotenv(override=False)
    return Settings.from_env()
