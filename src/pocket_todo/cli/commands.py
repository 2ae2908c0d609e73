# src/pocket_todo/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..connectors.view import render_task_list
from ..core.state import AppState
from ..tasks import task_api

# Handlers get the raw text after "/name " so task text and search terms keep
# their inner whitespace.
CommandHandler = Callable[[AppState, str], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        name, _, rest = line[1:].partition(" ")
        name = name.lower()
        if not name:
            return "Empty command. Use /help to list available commands."

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, rest)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit.")
        lines.append("Any other line adds a task (or saves the edit, while editing).")
        lines.append("While editing, text starting with '/' is read as a command; use /save <text> for it.")
        return "\n".join(lines)


registry = CommandRegistry()


def _with_view(state: AppState, reply: str) -> str:
    return f"{reply}\n{render_task_list(state)}"


def _position_arg(state: AppState, arg: str, usage: str):
    """Resolve a 1-based view position argument; returns (task, error_reply)."""
    parts = arg.split()
    if not parts:
        return None, usage
    try:
        position = int(parts[0])
    except ValueError:
        return None, f"Not a task number: {parts[0]}. {usage}"
    task = task_api.task_at(state, position)
    if task is None:
        return None, f"No task #{position} in the current list."
    return task, None


def cmd_help(state: AppState, arg: str) -> str:
    return registry.build_help()


def cmd_list(state: AppState, arg: str) -> str:
    return render_task_list(state)


def cmd_add(state: AppState, arg: str) -> str:
    reply = task_api.submit_new_task(state, arg)
    if reply == task_api.EMPTY_TASK_MESSAGE:
        return reply
    return _with_view(state, reply)


def cmd_edit(state: AppState, arg: str) -> str:
    task, err = _position_arg(state, arg, "Usage: /edit <n>.")
    if err:
        return err
    return task_api.begin_edit(state, task)


def cmd_save(state: AppState, arg: str) -> str:
    reply = task_api.save_edit(state, arg or None)
    if state.edit.is_open:
        return reply
    return _with_view(state, reply)


def cmd_cancel(state: AppState, arg: str) -> str:
    return task_api.cancel_edit(state)


def cmd_delete(state: AppState, arg: str) -> str:
    task, err = _position_arg(state, arg, "Usage: /del <n>.")
    if err:
        return err
    return _with_view(state, task_api.remove_task(state, task.id))


def cmd_done(state: AppState, arg: str) -> str:
    task, err = _position_arg(state, arg, "Usage: /done <n>.")
    if err:
        return err
    return _with_view(state, task_api.toggle_task(state, task.id))


def cmd_search(state: AppState, arg: str) -> str:
    return _with_view(state, task_api.set_search(state, arg))


def cmd_dark(state: AppState, arg: str) -> str:
    """
    /dark        -> toggle
    /dark on     -> enable dark mode
    /dark off    -> disable dark mode
    """
    choice = arg.strip().lower()
    if not choice:
        state.dark_mode = not state.dark_mode
    elif choice in ("on", "1", "true", "yes"):
        state.dark_mode = True
    elif choice in ("off", "0", "false", "no"):
        state.dark_mode = False
    else:
        return "Usage: /dark [on|off]."

    logger.debug("Dark mode set to %s", state.dark_mode)
    return _with_view(state, f"Dark mode {'ON' if state.dark_mode else 'OFF'}.")


def cmd_status(state: AppState, arg: str) -> str:
    store = state.task_store
    search = store.search_term or "(none)"
    if state.edit.is_open:
        editing = f'task {state.edit.task_id}, draft "{state.edit.draft}"'
    else:
        editing = "no"
    return (
        "Status:\n"
        f"  Tasks: {store.count_tasks()} ({store.count_completed()} done)\n"
        f"  Search: {search}\n"
        f"  Theme: {'dark' if state.dark_mode else 'light'}\n"
        f"  Editing: {editing}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the current task list.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a task: /add <text>.")
registry.register("edit", cmd_edit, help_text="Edit task n of the list: /edit <n>.")
registry.register("save", cmd_save, help_text="Save the edit: /save [text].")
registry.register("cancel", cmd_cancel, help_text="Close the edit without saving.")
registry.register("del", cmd_delete, help_text="Delete task n: /del <n>.", aliases=["rm", "delete"])
registry.register("done", cmd_done, help_text="Toggle completion of task n: /done <n>.", aliases=["toggle"])
registry.register("search", cmd_search, help_text="Filter tasks: /search [term] (no term clears).", aliases=["find"])
registry.register("dark", cmd_dark, help_text="Dark mode: /dark [on|off].", aliases=["theme"])
registry.register("status", cmd_status, help_text="Show counts, search, theme and edit state.")
