# src/tasklist/tasks/errors.py

from __future__ import annotations

from .task_models import TaskId


class TaskListError(Exception):
    """Base class for recoverable task list failures."""


class EmptyTaskTextError(TaskListError, ValueError):
    """Raised when the trimmed task text is empty."""

    def __init__(self, raw_text: str = "") -> None:
        super().__init__("task text is empty")
        self.raw_text = raw_text


class TaskNotFoundError(TaskListError, LookupError):
    """Raised when an id does not (or no longer) refer to a task."""

    def __init__(self, task_id: TaskId | None) -> None:
        super().__init__(f"task not found: {task_id}")
        self.task_id = task_id
