# src/todo_tracker/cli/main.py

"""
CLI entrypoint.

Loads settings, initializes logging, builds AppState, then runs the menus
in the main thread until the user exits (or presses Ctrl+C / Ctrl+D).
"""

from __future__ import annotations

import logging
import sys

from .bootstrap import create_initial_state
from .menus import TodoApp
from .prompts import Console
from ..config import get_settings
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()
    log_file = setup_logging(log_dir=settings.log_dir, console_level=settings.console_level)

    logger.info("Starting %s (tasks=%s, log=%s)", settings.app_name, settings.tasks_path, log_file)

    try:
        state = create_initial_state(settings=settings)
        TodoApp(state, Console(clear_screen=settings.clear_screen)).run()
    except (KeyboardInterrupt, EOFError):
        logger.info("Interrupted, exiting.")
        print("\nInterrupted. Goodbye.")
    except Exception:
        logger.exception("Unexpected error in the menu loop.")
        return 1

    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
