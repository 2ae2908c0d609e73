# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from pocket_todo.core.state import AppState
from pocket_todo.tasks.task_store import TaskListStore


@pytest.fixture(autouse=True)
def _no_color(monkeypatch: pytest.MonkeyPatch) -> None:
    # Rendered output is asserted as plain text.
    monkeypatch.setenv("NO_COLOR", "1")


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the developer's environment and .env.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        log_to_file=False,
        log_dir=tmp_path / "logs",
        console_enabled=True,
        dark_mode=False,
        strict_edit=False,
    )


@pytest.fixture()
def store() -> TaskListStore:
    return TaskListStore()


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskListStore) -> AppState:
    return AppState(settings=settings, task_store=store, dark_mode=settings.dark_mode)
