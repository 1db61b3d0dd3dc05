# src/taskbook/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console REPL in the main thread.
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

    log_dir = settings.data_dir if settings.log_to_file else None
    log_file = setup_logging(console_level=console_level, log_dir=log_dir)

    logger.info("Starting %s...", settings.app_name)
    if log_file is not None:
        logger.debug("Writing logs to %s", log_file)

    # IMPORTANT: reuse same settings object
    state = create_initial_state(settings=settings)

    try:
        run_console_loop(state)
    finally:
        logger.info(
            "Bye. %d task(s) in memory, %d done.",
            state.task_store.count_tasks(),
            state.task_store.count_done(),
        )


if __name__ == "__main__":
    main()
