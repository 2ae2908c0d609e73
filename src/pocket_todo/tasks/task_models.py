# src/pocket_todo/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass


class TaskError(Exception):
    """Base class for task store errors."""


class ValidationError(TaskError, ValueError):
    """Rejected input (e.g. task text that is empty after trimming)."""


class NotFoundError(TaskError, LookupError):
    """No task with the requested id exists (anymore)."""

    def __init__(self, task_id: int) -> None:
        super().__init__(f"task not found: {task_id}")
        self.task_id = task_id


@dataclass(frozen=True, slots=True)
class Task:
    """Immutable snapshot; the store swaps in a new instance on every change."""

    id: int
    text: str
    completed: bool = False

    def matches(self, term: str) -> bool:
        """Case-insensitive substring match; an empty term matches everything."""
        return term.lower() in self.text.lower()
