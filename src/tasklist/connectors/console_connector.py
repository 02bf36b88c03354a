# src/tasklist/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.state import ScreenState
from ..tasks.errors import EmptyTaskTextError, TaskListError
from .console_view import render_screen

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("/exit", "/quit")


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def run_console_loop(state: ScreenState) -> None:
    """
    Interactive front end for one screen session.

    Plain text goes into the input field and is submitted; slash commands go
    through the command registry. The screen is redrawn from the store after
    every change, so the view never holds state of its own.
    """
    settings = getattr(state, "settings", None)
    app_name = str(getattr(settings, "app_name", "tasklist"))
    with_ts = bool(getattr(settings, "console_timestamps", True))

    def emit(text: str) -> None:
        if with_ts:
            print(f"[{_ts_local()}] {text}", flush=True)
        else:
            print(text, flush=True)

    def redraw() -> None:
        state.remember_snapshot()
        print(render_screen(state.store, title=app_name), flush=True)

    logger.info("Console connector started (tasks=%s).", state.store.task_count())
    emit("Type a task and press Enter to add it. Use /help for commands, /exit to quit.")
    redraw()

    while True:
        try:
            line = input("> ")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        text = line.strip()
        if text.lower() in EXIT_COMMANDS:
            logger.info("Console exit command received.")
            break

        if text.startswith("/"):
            try:
                reply = command_registry.handle(state, text, emit=emit)
            except TaskListError as e:
                logger.info("Command dropped: %s", e)
                reply = f"Nothing changed: {e}."
            except Exception:
                logger.exception("Command handler crashed.")
                reply = "Internal error while handling a command."
            if reply is not None:
                print(reply, flush=True)
            continue

        state.store.update_input(line)
        if not state.store.can_submit:
            # Blank input: the add button would be disabled.
            continue

        try:
            task_id = state.store.submit_input()
        except EmptyTaskTextError:
            continue
        logger.debug("Console added task id=%s", task_id)
        redraw()

    logger.info("Console connector finished.")
