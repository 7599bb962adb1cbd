# src/taskpad/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console front end.
Tasks live in memory only; everything is gone when the process exits.
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

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    setup_logging(console_level=console_level, log_file=getattr(settings, "log_file", None))

    logger.info("Starting %s...", getattr(settings, "app_name", "taskpad"))

    try:
        state = create_initial_state(settings=settings)
    except ValueError:
        logger.exception("Invalid task store configuration (check TASKPAD_ID_SEED).")
        raise SystemExit(2)

    try:
        if settings.console_enabled:
            run_console_loop(state)
        else:
            logger.info("Console disabled; nothing to run (tasks=%s).", state.task_store.count())
    finally:
        logger.info("Bye.")


if __name__ == "__main__":
    main()
