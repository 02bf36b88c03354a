# src/tasklist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the presentation layer.

Connectors and commands depend on this Protocol instead of the concrete
TaskListStore, which keeps them testable with a fake.
"""

from typing import Protocol

from ..tasks.task_models import Task, TaskId


class TaskListRepo(Protocol):
    # Mutations
    def add_task(self, raw_text: str) -> TaskId: ...
    def toggle_complete(self, task_id: TaskId) -> bool: ...
    def delete_task(self, task_id: TaskId) -> None: ...

    # Snapshot queries
    def list_tasks(self) -> tuple[Task, ...]: ...
    def task_count(self) -> int: ...
    def outstanding_count(self) -> int: ...
    def get_task(self, task_id: TaskId) -> Task: ...

    @property
    def revision(self) -> int: ...

    # Pending input (text field + add button)
    @property
    def input_text(self) -> str: ...
    @property
    def can_submit(self) -> bool: ...
    def update_input(self, text: str) -> None: ...
    def submit_input(self) -> TaskId: ...

    def close(self) -> None: ...
