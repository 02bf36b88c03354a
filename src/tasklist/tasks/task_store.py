# src/tasklist/tasks/task_store.py

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterator
from dataclasses import replace

from .errors import EmptyTaskTextError, TaskNotFoundError
from .task_models import Task, TaskId

logger = logging.getLogger(__name__)


def is_submittable(text: str) -> bool:
    """True when `text` would be accepted by TaskListStore.add_task."""
    return bool(text.strip())


class TaskListStore:
    """
    In-memory task list for a single screen session.

    - tasks are kept in insertion order (dict order); deletion never reorders
    - ids come from a monotonic counter and are never reused
    - the store is the only place where `completed` changes
    - list_tasks() hands out a tuple snapshot valid until the next mutation

    Not thread-safe: one store per session, driven from one thread.
    """

    def __init__(self) -> None:
        self._tasks: dict[TaskId, Task] = {}
        self._ids = itertools.count(1)
        self._input_text = ""
        self._revision = 0
        self._closed = False
        logger.debug("TaskListStore created")

    def close(self) -> None:
        """Dispose the store. Further calls (except close) raise RuntimeError."""
        if self._closed:
            return
        logger.debug("TaskListStore closed total=%s", len(self._tasks))
        self._tasks.clear()
        self._input_text = ""
        self._closed = True

    @property
    def closed(self) -> bool:
        # Readable after close(); everything else raises.
        return self._closed

    # ---- low-level helpers ----

    def _check_open(self) -> None:
        if self._closed:
            raise RuntimeError("TaskListStore is closed")

    def _bump(self) -> None:
        self._revision += 1

    # ---- queries ----

    @property
    def revision(self) -> int:
        """Incremented on every successful add/toggle/delete."""
        self._check_open()
        return self._revision

    def list_tasks(self) -> tuple[Task, ...]:
        self._check_open()
        return tuple(self._tasks.values())

    def task_count(self) -> int:
        self._check_open()
        return len(self._tasks)

    def outstanding_count(self) -> int:
        self._check_open()
        return sum(1 for t in self._tasks.values() if not t.completed)

    def get_task(self, task_id: TaskId) -> Task:
        self._check_open()
        task = self._tasks.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def __len__(self) -> int:
        return self.task_count()

    def __iter__(self) -> Iterator[Task]:
        return iter(self.list_tasks())

    def __contains__(self, task_id: object) -> bool:
        self._check_open()
        return task_id in self._tasks

    # ---- mutations ----

    def add_task(self, raw_text: str) -> TaskId:
        self._check_open()
        name = raw_text.strip()
        if not name:
            raise EmptyTaskTextError(raw_text)

        task_id = next(self._ids)
        self._tasks[task_id] = Task(id=task_id, name=name)
        self._bump()
        logger.debug("Task added id=%s total=%s", task_id, len(self._tasks))
        return task_id

    def toggle_complete(self, task_id: TaskId) -> bool:
        task = self.get_task(task_id)
        # Reassigning an existing key keeps its position in the dict.
        updated = replace(task, completed=not task.completed)
        self._tasks[task_id] = updated
        self._bump()
        logger.debug("Task toggled id=%s completed=%s", task_id, updated.completed)
        return updated.completed

    def delete_task(self, task_id: TaskId) -> None:
        self._check_open()
        if self._tasks.pop(task_id, None) is None:
            raise TaskNotFoundError(task_id)
        self._bump()
        logger.debug("Task deleted id=%s total=%s", task_id, len(self._tasks))

    # ---- pending input ----

    @property
    def input_text(self) -> str:
        self._check_open()
        return self._input_text

    def update_input(self, text: str) -> None:
        self._check_open()
        self._input_text = text

    @property
    def can_submit(self) -> bool:
        return is_submittable(self.input_text)

    def submit_input(self) -> TaskId:
        """
        Add the pending input as a task and clear it.

        On EmptyTaskTextError the input is left untouched.
        """
        task_id = self.add_task(self._input_text)
        self._input_text = ""
        return task_id
