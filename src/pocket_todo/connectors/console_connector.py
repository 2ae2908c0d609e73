# src/pocket_todo/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..tasks import task_api
from .view import render_task_list

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def _handle_plain_line(state: AppState, raw_line: str) -> str:
    """
    A non-command line is what the user typed into the text box.

    While the edit dialog is open it is the new text (stored as typed);
    otherwise it is a new task.
    """
    if state.edit.is_open:
        reply = task_api.save_edit(state, raw_line)
    else:
        reply = task_api.submit_new_task(state, raw_line)
        if reply == task_api.EMPTY_TASK_MESSAGE:
            return reply
    return f"{reply}\n{render_task_list(state)}"


def _prompt(state: AppState) -> str:
    if state.edit.is_open:
        return f"edit [{state.edit.draft}]> "
    return "todo> "


def run_console_loop(state: AppState) -> None:
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "pocket-todo"))
    logger.info("Console connector started (dark_mode=%s).", state.dark_mode)
    _print_ts(f"[{app_name}] Type a task to add it. Use /help for commands. Use /exit to quit.\n")
    print(render_task_list(state))

    while True:
        try:
            raw_line = input(_prompt(state))
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        user_input = raw_line.strip()

        if not user_input and not state.edit.is_open:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            # handlers receive the text after the command name as typed
            reply = command_registry.handle(state, raw_line.lstrip())
            if reply is None:
                reply = _handle_plain_line(state, raw_line)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        print(reply)

    logger.info("Console connector finished.")
