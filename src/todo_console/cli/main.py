# src/todo_console/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (loading the task file), then runs the
interactive console menu in the main thread.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging
from ..tasks.errors import StorageError

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    try:
        state = create_initial_state(settings=settings)
    except StorageError as e:
        logger.error("Cannot start: %s", e)
        print(f"Cannot load tasks: {e}", file=sys.stderr)
        return 1

    try:
        run_console_loop(state)
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt received, shutting down...")
        print()

    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
