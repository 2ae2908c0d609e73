# src/pocket_todo/tasks/task_api.py

"""
Presentation-side use cases on top of the store.

These helpers translate store errors into user-facing outcomes:
- ValidationError on add -> "Task cannot be empty" (store unchanged)
- NotFoundError on edit/toggle -> silent no-op (the task is already gone)
"""

from __future__ import annotations

import logging

from ..core.state import AppState
from .task_models import NotFoundError, Task, ValidationError

logger = logging.getLogger(__name__)

EMPTY_TASK_MESSAGE = "Task cannot be empty"


def submit_new_task(state: AppState, text: str) -> str:
    try:
        task = state.task_store.add(text)
    except ValidationError:
        logger.debug("Rejected empty task input.")
        return EMPTY_TASK_MESSAGE
    return f'Added: "{task.text}"'


def task_at(state: AppState, position: int) -> Task | None:
    """Return the task at a 1-based position of the current filtered view."""
    view = state.task_store.filtered_view()
    if position < 1 or position > len(view):
        return None
    return view[position - 1]


def begin_edit(state: AppState, task: Task) -> str:
    state.edit.open(task.id, task.text)
    return f'Editing: "{task.text}". Type the new text (or /save <text>, /cancel).'


def save_edit(state: AppState, text: str | None = None) -> str:
    session = state.edit
    if not session.is_open or session.task_id is None:
        return "No task is being edited."

    if text is not None:
        session.draft = text

    task_id = session.task_id
    try:
        task = state.task_store.edit(task_id, session.draft)
    except NotFoundError:
        logger.info("Edit target vanished task_id=%s; dropping edit.", task_id)
        session.close()
        return "That task no longer exists."
    except ValidationError:
        # Only reachable with strict edit; keep the dialog open.
        return EMPTY_TASK_MESSAGE

    session.close()
    return f'Saved: "{task.text}"'


def cancel_edit(state: AppState) -> str:
    if not state.edit.is_open:
        return "No task is being edited."
    state.edit.close()
    return "Edit cancelled."


def toggle_task(state: AppState, task_id: int) -> str:
    try:
        task = state.task_store.toggle_complete(task_id)
    except NotFoundError:
        logger.info("Toggle target vanished task_id=%s; ignoring.", task_id)
        return "That task no longer exists."
    mark = "done" if task.completed else "not done"
    return f'Marked {mark}: "{task.text}"'


def remove_task(state: AppState, task_id: int) -> str:
    task = state.task_store.get_task(task_id)
    state.task_store.delete(task_id)
    if state.edit.task_id == task_id:
        state.edit.close()
    if task is None:
        return "That task no longer exists."
    return f'Deleted: "{task.text}"'


def set_search(state: AppState, term: str) -> str:
    state.task_store.set_search_term(term)
    if not term:
        return "Search cleared."
    return f'Searching for "{term}".'
