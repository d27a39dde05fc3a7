# src/todoz/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, loads tasks and runs the console REPL.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import level_from_name, setup_logging
from .bootstrap import create_initial_state, load_tasks
from .render import render_goodbye, render_welcome

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    console_level = level_from_name(settings.log_level)
    setup_logging(log_file=settings.log_file, console_level=console_level)

    logger.info("Starting %s (store=%s)...", settings.app_name, settings.todos_path)

    # IMPORTANT: reuse same settings object
    state = create_initial_state(settings=settings)

    print(render_welcome())

    warning = load_tasks(state)
    if warning:
        print(warning)

    try:
        run_console_loop(state)
    finally:
        print(render_goodbye())
        logger.info("Bye.")


if __name__ == "__main__":
    main()
