# src/tasklist/connectors/console_view.py

"""
Plain-text rendering of the task list screen.

Everything here is a pure function of a store snapshot: the view never
keeps its own copy of `completed`, it reads it from the Task values.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..core.ports import TaskListRepo
from ..tasks.errors import TaskNotFoundError
from ..tasks.task_models import Task, TaskId

EMPTY_LIST_TEXT = "(no tasks)"


def render_row(row_number: int, task: Task) -> str:
    mark = "x" if task.completed else " "
    return f"{row_number}. [{mark}] {task.name}"


def render_rows(tasks: Sequence[Task]) -> list[str]:
    return [render_row(i, t) for i, t in enumerate(tasks, start=1)]


def render_counter(store: TaskListRepo) -> str:
    return f"Tasks: {store.task_count()} (outstanding: {store.outstanding_count()})"


def render_add_affordance(store: TaskListRepo) -> str:
    return "[add enabled]" if store.can_submit else "[add disabled]"


def render_screen(store: TaskListRepo, *, title: str = "tasklist") -> str:
    """Header, one row per task (or a placeholder), the counter and the add button state."""
    rows = render_rows(store.list_tasks())
    lines = [f"== {title} =="]
    lines.extend(rows or [EMPTY_LIST_TEXT])
    lines.append(render_counter(store))
    lines.append(render_add_affordance(store))
    return "\n".join(lines)


def resolve_row(snapshot: Sequence[Task], row: int | str) -> TaskId:
    """
    Map a 1-based row number from the last rendered snapshot to a task id.

    Raises TaskNotFoundError when the row does not exist in that snapshot.
    The returned id may still be gone from the store; the store reports that.
    """
    try:
        n = int(str(row).rstrip("."))
    except ValueError:
        raise TaskNotFoundError(None) from None
    if n < 1 or n > len(snapshot):
        raise TaskNotFoundError(None)
    return snapshot[n - 1].id
