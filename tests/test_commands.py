# tests/test_commands.py

from __future__ import annotations

from tasklist.cli.commands import CommandRegistry, registry


def test_command_registry_routes_2_and_3_params(state) -> None:
    reg = CommandRegistry()
    called = {"h2": 0, "h3": 0}

    def h2(state, rest):
        assert rest == "x  y"
        called["h2"] += 1
        return "h2"

    def h3(state, rest, emit):
        called["h3"] += 1
        if emit is not None:
            emit("note")
        return "h3"

    reg.register("a", h2, "a")
    reg.register("b", h3, "b", aliases=["bee"])

    notes: list[str] = []
    assert reg.handle(state, "/a x  y") == "h2"
    assert reg.handle(state, "/BEE y", emit=notes.append) == "h3"
    assert called == {"h2": 1, "h3": 1}
    assert notes == ["note"]


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_help_lists_registered_commands(state) -> None:
    text = registry.handle(state, "/help") or ""
    for name in ("/add", "/toggle", "/rm", "/list", "/count"):
        assert name in text


def test_add_command_renders_new_row(state) -> None:
    reply = registry.handle(state, "/add   Buy milk  ") or ""

    assert state.store.list_tasks()[0].name == "Buy milk"
    assert "1. [ ] Buy milk" in reply
    assert "Tasks: 1 (outstanding: 1)" in reply


def test_add_command_keeps_inner_whitespace(state) -> None:
    registry.handle(state, "/add two  words\tand tab ")
    registry.handle(state, "/ADD\tx  y")

    assert [t.name for t in state.store.list_tasks()] == ["two  words\tand tab", "x  y"]


def test_add_command_rejects_blank(state) -> None:
    reply = registry.handle(state, "/add") or ""
    assert "must not be blank" in reply
    assert state.store.task_count() == 0


def test_toggle_and_rm_by_row(state) -> None:
    registry.handle(state, "/add Buy milk")
    registry.handle(state, "/add Walk dog")

    notes: list[str] = []
    reply = registry.handle(state, "/toggle 1", emit=notes.append) or ""
    assert "1. [x] Buy milk" in reply
    assert "2. [ ] Walk dog" in reply
    assert notes == ["Row 1 marked done."]

    reply = registry.handle(state, "/rm 2", emit=notes.append) or ""
    assert [(t.name, t.completed) for t in state.store.list_tasks()] == [("Buy milk", True)]
    assert "Walk dog" not in reply
    assert "Tasks: 1 (outstanding: 0)" in reply
    assert notes[-1] == 'Removed "Walk dog".'


def test_row_commands_report_missing_rows(state) -> None:
    registry.handle(state, "/add only")

    assert registry.handle(state, "/toggle 5") == "No task at row 5."
    assert registry.handle(state, "/rm zero") == "No task at row zero."
    assert registry.handle(state, "/rm") == "Usage: /rm <row>"
    assert state.store.task_count() == 1


def test_stale_row_is_dropped_without_crash(state) -> None:
    registry.handle(state, "/add a")
    registry.handle(state, "/add b")
    stale = state.shown

    # Delete behind the view's back, then act on the old snapshot.
    state.store.delete_task(stale[1].id)
    state.shown = stale

    assert registry.handle(state, "/toggle 2") == "No task at row 2."
    assert registry.handle(state, "/rm 2") == "No task at row 2."
    assert [t.name for t in state.store.list_tasks()] == ["a"]


def test_count_and_status(state) -> None:
    registry.handle(state, "/add a")
    registry.handle(state, "/add b")
    registry.handle(state, "/x 1")

    assert registry.handle(state, "/count") == "Tasks: 2 (outstanding: 1)"
    status = registry.handle(state, "/status") or ""
    assert "App: tasklist-test" in status
    assert "Revision: 3" in status
    assert "Demo seed: OFF" in status
