# src/todoz/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import QUIT_COMMAND
from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

PROMPT = "todoz › "


def run_console_loop(state: AppState, *, registry=None) -> None:
    """
    Blocking read-dispatch-print loop.

    Ends on "quit", EOF on stdin, or Ctrl-C at the prompt. Command errors never
    end the loop.
    """
    registry = registry or command_registry
    logger.info("Console loop started (store=%s).", state.task_store.path)

    def emit(text: str) -> None:
        # Immediate output for long-running commands (e.g. the focus timer).
        print(text, flush=True)

    while True:
        try:
            user_input = state.prompt(PROMPT).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if user_input == QUIT_COMMAND:
            logger.info("Console quit command received.")
            break

        try:
            reply = registry.handle(state, user_input, emit=emit)
        except KeyboardInterrupt:
            # Ctrl-C during a command (e.g. the rm-all confirmation) only aborts that command.
            print()
            continue
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply:
            print(reply)

    logger.info("Console loop finished.")
