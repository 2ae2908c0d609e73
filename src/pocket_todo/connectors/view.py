# src/pocket_todo/connectors/view.py

from __future__ import annotations

from ..core.state import AppState
from .theme import BOLD, STRIKE, paint, palette_for


def render_task_list(state: AppState, *, color: bool | None = None) -> str:
    """
    Render the current filtered view as numbered rows.

    Row numbers are positions in the view (what /edit, /del and /done take),
    not task ids.
    """
    pal = palette_for(state.dark_mode)
    store = state.task_store
    view = store.filtered_view()

    title = "To-Do List"
    if store.search_term:
        title += f' (search: "{store.search_term}", {len(view)}/{store.count_tasks()})'
    lines = [paint(title, pal.title, BOLD, enabled=color)]

    if not view:
        empty = "(no matching tasks)" if store.search_term else "(no tasks yet)"
        lines.append(paint(empty, pal.notice, enabled=color))
        return "\n".join(lines)

    for pos, task in enumerate(view, start=1):
        box = "[x]" if task.completed else "[ ]"
        num = paint(f"{pos:>2}.", pal.index, enabled=color)
        if task.completed:
            body = paint(task.text, pal.done, STRIKE, enabled=color)
        else:
            body = paint(task.text, pal.text, enabled=color)
        marker = " *" if state.edit.is_open and state.edit.task_id == task.id else ""
        lines.append(f"{num} {box} {body}{marker}")
    return "\n".join(lines)
