# src/tasklist/core/state.py

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..tasks.task_models import Task
from .ports import TaskListRepo

logger = logging.getLogger(__name__)


@dataclass
class ScreenState:
    """
    Everything one screen session owns.

    The store is created per session (see cli.bootstrap) and disposed with
    the session; nothing here is shared process-wide.
    """

    settings: object
    store: TaskListRepo

    # Last snapshot shown to the user; row numbers typed by the user refer to it.
    shown: tuple[Task, ...] = field(default_factory=tuple)

    def remember_snapshot(self) -> tuple[Task, ...]:
        self.shown = self.store.list_tasks()
        return self.shown

    def dispose(self) -> None:
        logger.debug("Disposing screen state")
        self.shown = ()
        self.store.close()
