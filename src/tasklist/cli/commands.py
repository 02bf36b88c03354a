# src/tasklist/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..connectors.console_view import render_counter, render_screen, resolve_row
from ..core.state import ScreenState
from ..tasks.errors import EmptyTaskTextError, TaskNotFoundError

CommandEmitter = Callable[[str], None]
# Handlers get the text after the command word untouched; (state, rest) or (state, rest, emit).
CommandHandler = Callable[..., str]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Command:
    name: str
    handler: CommandHandler
    help_text: str
    takes_emit: bool


def _takes_emit(handler: CommandHandler) -> bool:
    return len(inspect.signature(handler).parameters) >= 3


class CommandRegistry:
    """Maps "/name rest-of-line" to task list actions."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}
        self._names: list[str] = []

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        cmd = Command(name.lower(), handler, help_text, _takes_emit(handler))
        self._names.append(cmd.name)
        for key in [cmd.name, *(a.lower() for a in aliases or [])]:
            self._commands[key] = cmd

    def handle(
        self,
        state: ScreenState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Run the command in `line`.

        Returns None when `line` is not a command. The remainder after the
        command word is passed on as typed, so "/add two  words" keeps the
        double space.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split(maxsplit=1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        head = parts[0].lower()
        rest = parts[1] if len(parts) > 1 else ""

        cmd = self._commands.get(head)
        if cmd is None:
            return f"Unknown command: /{head}. Use /help to list available commands."

        if cmd.takes_emit:
            return cmd.handler(state, rest, emit)
        return cmd.handler(state, rest)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        lines.extend(f"  /{n} - {self._commands[n].help_text}" for n in self._names)
        lines.append("  (plain text adds a task)")
        return "\n".join(lines)


registry = CommandRegistry()


def _title(state: ScreenState) -> str:
    return str(getattr(state.settings, "app_name", "tasklist"))


def _show(state: ScreenState) -> str:
    state.remember_snapshot()
    return render_screen(state.store, title=_title(state))


def _single_row(rest: str) -> str | None:
    parts = rest.split()
    return parts[0] if len(parts) == 1 else None


def cmd_help(state: ScreenState, rest: str) -> str:
    return registry.build_help()


def cmd_add(state: ScreenState, rest: str) -> str:
    """
    /add <text...>  -> add a task; the store trims the ends, inner spacing is kept
    """
    try:
        task_id = state.store.add_task(rest)
    except EmptyTaskTextError:
        return "Usage: /add <task text>. Task text must not be blank."
    logger.debug("Command add -> id=%s", task_id)
    return _show(state)


def cmd_toggle(state: ScreenState, rest: str, emit: CommandEmitter | None = None) -> str:
    """
    /toggle <row>  -> flip completion of the task shown at that row
    """
    row = _single_row(rest)
    if row is None:
        return "Usage: /toggle <row>"
    try:
        completed = state.store.toggle_complete(resolve_row(state.shown, row))
    except TaskNotFoundError:
        logger.info("Toggle dropped: no task at row %s", row)
        return f"No task at row {row}."
    if emit:
        emit(f"Row {row} marked {'done' if completed else 'not done'}.")
    return _show(state)


def cmd_rm(state: ScreenState, rest: str, emit: CommandEmitter | None = None) -> str:
    """
    /rm <row>  -> delete the task shown at that row
    """
    row = _single_row(rest)
    if row is None:
        return "Usage: /rm <row>"
    try:
        task_id = resolve_row(state.shown, row)
        name = state.store.get_task(task_id).name
        state.store.delete_task(task_id)
    except TaskNotFoundError:
        logger.info("Delete dropped: no task at row %s", row)
        return f"No task at row {row}."
    if emit:
        emit(f'Removed "{name}".')
    return _show(state)


def cmd_list(state: ScreenState, rest: str) -> str:
    return _show(state)


def cmd_count(state: ScreenState, rest: str) -> str:
    return render_counter(state.store)


def cmd_status(state: ScreenState, rest: str) -> str:
    seeded = "ON" if getattr(state.settings, "seed_demo", False) else "OFF"
    return (
        "Status:\n"
        f"  App: {_title(state)}\n"
        f"  Tasks: {state.store.task_count()}\n"
        f"  Revision: {state.store.revision}\n"
        f"  Demo seed: {seeded}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Add a task: /add <text>.")
registry.register(
    "toggle", cmd_toggle, help_text="Mark a row done/not done: /toggle <row>.", aliases=["done", "x"]
)
registry.register("rm", cmd_rm, help_text="Delete a row: /rm <row>.", aliases=["del", "delete"])
registry.register("list", cmd_list, help_text="Redraw the task list.", aliases=["ls"])
registry.register("count", cmd_count, help_text="Show total and outstanding task counts.")
registry.register("status", cmd_status, help_text="Show app name, task count and revision.")
