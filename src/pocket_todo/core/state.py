# src/pocket_todo/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .ports import TaskRepo


@dataclass(slots=True)
class EditSession:
    """
    Edit-in-progress fields owned by the presentation layer.

    Mirrors an edit dialog: which task is being edited, the draft text box
    contents, and whether the dialog is open.
    """

    task_id: int | None = None
    draft: str = ""
    is_open: bool = False

    def open(self, task_id: int, text: str) -> None:
        self.task_id = task_id
        self.draft = text
        self.is_open = True

    def close(self) -> None:
        self.task_id = None
        self.draft = ""
        self.is_open = False


@dataclass
class AppState:
    # Settings are kept on the state so commands/connectors do not re-read config.
    settings: Any

    task_store: TaskRepo
    dark_mode: bool = False

    edit: EditSession = field(default_factory=EditSession)
