# tests/test_commands.py

from __future__ import annotations

from pocket_todo.cli.commands import CommandRegistry, registry
from pocket_todo.core.state import AppState


def test_command_registry_passes_raw_argument_text(state: AppState) -> None:
    reg = CommandRegistry()
    seen: list[str] = []

    def handler(state, arg):
        seen.append(arg)
        return "ok"

    reg.register("a", handler, "a", aliases=["bee"])

    assert reg.handle(state, "/a x") == "ok"
    assert reg.handle(state, "/BEE  two   words ") == "ok"
    assert reg.handle(state, "/a") == "ok"
    assert seen == ["x", " two   words ", ""]


def test_command_registry_unknown_and_non_command(state: AppState) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_add_and_list(state: AppState) -> None:
    reply = registry.handle(state, "/add Buy milk") or ""
    assert 'Added: "Buy milk"' in reply
    assert " 1. [ ] Buy milk" in reply

    assert registry.handle(state, "/add    ") == "Task cannot be empty"
    assert state.task_store.count_tasks() == 1


def test_done_toggles_by_view_position(state: AppState) -> None:
    state.task_store.add("Buy milk")
    state.task_store.add("Walk dog")

    reply = registry.handle(state, "/done 2") or ""

    assert 'Marked done: "Walk dog"' in reply
    assert " 2. [x] Walk dog" in reply
    assert state.task_store.count_completed() == 1


def test_position_errors(state: AppState) -> None:
    state.task_store.add("a")
    assert registry.handle(state, "/del") == "Usage: /del <n>."
    assert "Not a task number" in (registry.handle(state, "/done x") or "")
    assert registry.handle(state, "/edit 5") == "No task #5 in the current list."


def test_search_then_delete_uses_filtered_positions(state: AppState) -> None:
    store = state.task_store
    store.add("Buy milk")
    store.add("Walk dog")
    store.add("Buy bread")

    reply = registry.handle(state, "/search buy") or ""
    assert '(search: "buy", 2/3)' in reply

    registry.handle(state, "/del 2")
    assert [t.text for t in store.list_tasks()] == ["Buy milk", "Walk dog"]

    reply = registry.handle(state, "/find") or ""
    assert "Search cleared." in reply
    assert store.search_term == ""


def test_edit_save_and_cancel(state: AppState) -> None:
    task = state.task_store.add("old")

    assert "Editing" in (registry.handle(state, "/edit 1") or "")
    reply = registry.handle(state, "/save brand new") or ""
    assert 'Saved: "brand new"' in reply
    assert state.task_store.get_task(task.id).text == "brand new"

    registry.handle(state, "/edit 1")
    assert registry.handle(state, "/cancel") == "Edit cancelled."
    assert state.task_store.get_task(task.id).text == "brand new"


def test_dark_mode_toggle(state: AppState) -> None:
    assert "Dark mode ON." in (registry.handle(state, "/dark") or "")
    assert state.dark_mode is True
    assert "Dark mode ON." in (registry.handle(state, "/theme on") or "")
    assert "Dark mode OFF." in (registry.handle(state, "/dark off") or "")
    assert state.dark_mode is False
    assert registry.handle(state, "/dark maybe") == "Usage: /dark [on|off]."


def test_status_and_help(state: AppState) -> None:
    state.task_store.add("a")
    state.task_store.toggle_complete(1)

    status = registry.handle(state, "/status") or ""
    assert "Tasks: 1 (1 done)" in status
    assert "Theme: light" in status

    help_text = registry.handle(state, "/?") or ""
    assert "/add" in help_text
    assert "/exit" in help_text


def test_add_keeps_inner_whitespace(state: AppState) -> None:
    registry.handle(state, "/add   Buy   milk  ")
    assert [t.text for t in state.task_store.list_tasks()] == ["Buy   milk"]


def test_save_keeps_text_as_typed(state: AppState) -> None:
    task = state.task_store.add("old")
    registry.handle(state, "/edit 1")
    registry.handle(state, "/save a   b")
    assert state.task_store.get_task(task.id).text == "a   b"


def test_save_accepts_text_starting_with_slash(state: AppState) -> None:
    task = state.task_store.add("path")
    registry.handle(state, "/edit 1")
    assert "Unknown command" in (registry.handle(state, "/usr/bin") or "")
    assert state.edit.is_open

    registry.handle(state, "/save /usr/bin")
    assert state.task_store.get_task(task.id).text == "/usr/bin"
    assert "/save <text>" in registry.build_help()


def test_search_keeps_inner_whitespace(state: AppState) -> None:
    state.task_store.add("Buy milk")
    spaced = state.task_store.add("Buy   milk")

    registry.handle(state, "/search y   m")

    assert state.task_store.search_term == "y   m"
    assert state.task_store.filtered_view() == [spaced]
