# src/pocket_todo/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing here is required: every variable has a default.
- Tests build their own settings object instead of reading the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


# Real environment variables win over .env values.
load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
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
    log_dir: Path

    # ---- Presentation ----
    console_enabled: bool
    dark_mode: bool

    # ---- Store policy ----
    strict_edit: bool

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            app_name=_env(_k("APP_NAME"), "pocket-todo").strip() or "pocket-todo",
            log_level=_env(_k("LOG_LEVEL"), "INFO"),
            log_to_file=_env_bool(_k("LOG_TO_FILE"), False),
            log_dir=_env_path(_k("LOG_DIR"), Path(".local/todo")),
            console_enabled=_env_bool(_k("CONSOLE_ENABLED"), True),
            dark_mode=_env_bool(_k("DARK_MODE"), False),
            strict_edit=_env_bool(_k("STRICT_EDIT"), False),
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
