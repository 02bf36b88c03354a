# src/tasklist/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass

TaskId = int
# Opaque handle returned by TaskListStore.add_task; never reused within one store.


@dataclass(frozen=True, slots=True)
class Task:
    """
    One to-do item.

    Instances are immutable: the store swaps in a new value (same id, same
    position) when completion changes, so a snapshot handed to the view can
    never be edited behind the store's back.
    """

    id: TaskId
    name: str
    completed: bool = False
