# src/pocket_todo/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires the in-memory store into AppState,
- applies the initial presentation settings (dark mode).
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_store import TaskListStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create a fresh, empty session from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    strict_edit = bool(getattr(settings, "strict_edit", False))
    state = AppState(
        settings=settings,
        task_store=TaskListStore(strict_edit=strict_edit),
        dark_mode=bool(getattr(settings, "dark_mode", False)),
    )
    logger.debug("Session state created strict_edit=%s dark_mode=%s", strict_edit, state.dark_mode)
    return state
