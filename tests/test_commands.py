# tests/test_commands.py

from __future__ import annotations

from taskbook.cli.commands import CommandRegistry, registry


def test_command_registry_routes_2_and_3_params(state) -> None:
    reg = CommandRegistry()
    called = {"h2": 0, "h3": 0}
    notes: list[str] = []

    def h2(state, args):
        called["h2"] += 1
        return "h2:" + ",".join(args)

    def h3(state, args, emit):
        called["h3"] += 1
        if emit is not None:
            emit("note")
        return "h3"

    reg.register("a", h2, "a")
    reg.register("b", h3, "b", aliases=["bee"])

    assert reg.handle(state, "/a x y") == "h2:x,y"
    assert reg.handle(state, "/BEE", emit=notes.append) == "h3"
    assert called == {"h2": 1, "h3": 1}
    assert notes == ["note"]


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_help_lists_registered_commands(state) -> None:
    text = registry.handle(state, "/help") or ""
    for name in ("add", "get", "list", "done", "delete", "status"):
        assert f"/{name} - " in text


def test_add_get_list_flow(state) -> None:
    assert registry.handle(state, "/add Buy milk") == "Added task #1: Buy milk"
    assert registry.handle(state, "/new Walk dog") == "Added task #2: Walk dog"
    assert registry.handle(state, "/get 1") == "#1 [ ] Buy milk"
    assert registry.handle(state, "/ls") == "#1 [ ] Buy milk\n#2 [ ] Walk dog"


def test_add_without_title_shows_usage(state) -> None:
    assert registry.handle(state, "/add") == "Usage: /add <title>"
    assert state.task_store.count_tasks() == 0


def test_list_empty(state) -> None:
    assert registry.handle(state, "/list") == "No tasks yet."


def test_done_and_delete(state) -> None:
    registry.handle(state, "/add Buy milk")
    registry.handle(state, "/add Walk dog")
    notes: list[str] = []

    assert registry.handle(state, "/done 1") == "Task #1 marked done."
    assert registry.handle(state, "/done 1") == "Task #1 marked done."
    assert registry.handle(state, "/rm 2", emit=notes.append) == "Deleted task #2: Walk dog"
    assert notes == ["Note: task #2 was still pending."]
    assert registry.handle(state, "/list") == "#1 [x] Buy milk"
    assert registry.handle(state, "/add Read book") == "Added task #3: Read book"


def test_missing_and_invalid_ids(state) -> None:
    assert registry.handle(state, "/get 5") == "Task #5 not found."
    assert registry.handle(state, "/done 5") == "Task #5 not found."
    assert registry.handle(state, "/delete 5") == "Task #5 not found."
    assert registry.handle(state, "/get abc") == "Invalid task id: abc"
    assert registry.handle(state, "/done -1") == "Invalid task id: -1"
    assert registry.handle(state, "/delete") == "Usage: /delete <id>"


def test_status(state) -> None:
    registry.handle(state, "/add a")
    registry.handle(state, "/add b")
    registry.handle(state, "/done 2")
    text = registry.handle(state, "/status") or ""
    assert text.startswith("taskbook-test status:")
    assert "Tasks: 2 (1 done, 1 pending)" in text
    assert "Next id: 3" in text
    assert "Locking: OFF" in text
