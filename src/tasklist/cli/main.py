# src/tasklist/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds one ScreenState, runs the console front end
in the main thread and disposes the session on the way out.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    # IMPORTANT: reuse same settings object
    state = create_initial_state(settings=settings)
    try:
        run_console_loop(state)
    finally:
        state.dispose()
        logger.info("Bye.")


if __name__ == "__main__":
    main()
