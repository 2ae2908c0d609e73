from __future__ import annotations

"""
Ports (interfaces) used by the presentation layer.

Connectors and commands depend on this Protocol instead of the concrete store,
so a different backing store can be swapped in without touching the UI.
"""

from typing import Any, Protocol


class TaskRepo(Protocol):
    @property
    def search_term(self) -> str: ...

    # Queries
    def get_task(self, task_id: int) -> Any | None: ...
    def list_tasks(self) -> list[Any]: ...
    def count_tasks(self) -> int: ...
    def count_completed(self) -> int: ...
    def filtered_view(self, search_term: str | None = None) -> list[Any]: ...
    def set_search_term(self, term: str | None) -> None: ...

    # Mutations
    def add(self, text: str) -> Any: ...
    def edit(self, task_id: int, new_text: str) -> Any: ...
    def delete(self, task_id: int) -> None: ...
    def toggle_complete(self, task_id: int) -> Any: ...
