# src/tasklist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- creates one TaskListStore for the screen session,
- inserts demo tasks through the regular add path when enabled.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..config import get_settings
from ..core.ports import TaskListRepo
from ..core.state import ScreenState
from ..tasks.errors import EmptyTaskTextError
from ..tasks.task_store import TaskListStore

logger = logging.getLogger(__name__)


def seed_demo_tasks(store: TaskListRepo, names: Iterable[str]) -> list[int]:
    """Add demo entries via add_task; blank names are skipped."""
    ids: list[int] = []
    for name in names:
        try:
            ids.append(store.add_task(name))
        except EmptyTaskTextError:
            logger.debug("Skipping blank seed task %r", name)
    logger.info("Seeded %d demo tasks", len(ids))
    return ids


def create_initial_state(*, settings=None) -> ScreenState:
    """
    Create ScreenState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    data_dir = getattr(settings, "data_dir", None)
    if data_dir is not None:
        data_dir.mkdir(parents=True, exist_ok=True)

    store = TaskListStore()
    if getattr(settings, "seed_demo", False):
        seed_demo_tasks(store, getattr(settings, "seed_tasks", ()))

    return ScreenState(settings=settings, store=store)
