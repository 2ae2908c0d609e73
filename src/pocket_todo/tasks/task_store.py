# src/pocket_todo/tasks/task_store.py

from __future__ import annotations

import itertools
import logging
from dataclasses import replace

from .task_models import NotFoundError, Task, ValidationError

logger = logging.getLogger(__name__)


class TaskListStore:
    """
    In-memory task list.

    The store is the sole mutator of its collection:
    - tasks are frozen; edit/toggle swap a new Task into the same slot
    - tasks keep insertion order; add always appends
    - ids come from a per-store counter and are never reused
    - filtered_view is recomputed on every call (no cached projection)

    Edit policy:
    - default: edit stores the text as given (no trim, no empty check)
    - strict_edit=True: edit follows the same rules as add
    """

    def __init__(self, *, strict_edit: bool = False) -> None:
        self._tasks: list[Task] = []
        self._ids = itertools.count(1)
        self._search_term: str = ""
        self.strict_edit = strict_edit
        logger.debug("TaskListStore ready strict_edit=%s", strict_edit)

    # ---- low-level helpers ----

    @staticmethod
    def _clean_text(text: str) -> str:
        cleaned = (text or "").strip()
        if not cleaned:
            raise ValidationError("empty task")
        return cleaned

    def _index(self, task_id: int) -> int:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        raise NotFoundError(task_id)

    # ---- queries ----

    @property
    def search_term(self) -> str:
        return self._search_term

    def get_task(self, task_id: int) -> Task | None:
        try:
            return self._tasks[self._index(task_id)]
        except NotFoundError:
            return None

    def list_tasks(self) -> list[Task]:
        return list(self._tasks)

    def count_tasks(self) -> int:
        return len(self._tasks)

    def count_completed(self) -> int:
        return sum(1 for t in self._tasks if t.completed)

    def filtered_view(self, search_term: str | None = None) -> list[Task]:
        """
        Return tasks whose text contains the search term (case-insensitive),
        in insertion order.

        search_term=None uses the store's current search term.
        """
        term = self._search_term if search_term is None else search_term
        return [t for t in self._tasks if t.matches(term)]

    def set_search_term(self, term: str | None) -> None:
        self._search_term = term or ""
        logger.debug("Search term set to %r", self._search_term)

    # ---- mutations ----

    def add(self, text: str) -> Task:
        cleaned = self._clean_text(text)
        task = Task(id=next(self._ids), text=cleaned)
        self._tasks.append(task)
        logger.debug("Task added id=%s total=%s", task.id, len(self._tasks))
        return task

    def edit(self, task_id: int, new_text: str) -> Task:
        """
        Replace the text of an existing task.

        Without strict_edit the text is stored verbatim, so an edit can leave
        a task with blank text. With strict_edit it is trimmed and an empty
        result raises ValidationError.
        """
        idx = self._index(task_id)
        if self.strict_edit:
            new_text = self._clean_text(new_text)
        task = replace(self._tasks[idx], text=new_text)
        self._tasks[idx] = task
        logger.debug("Task edited id=%s", task_id)
        return task

    def delete(self, task_id: int) -> None:
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if t.id != task_id]
        if len(self._tasks) != before:
            logger.debug("Task deleted id=%s total=%s", task_id, len(self._tasks))

    def toggle_complete(self, task_id: int) -> Task:
        idx = self._index(task_id)
        task = replace(self._tasks[idx], completed=not self._tasks[idx].completed)
        self._tasks[idx] = task
        logger.debug("Task toggled id=%s completed=%s", task_id, task.completed)
        return task
