# src/todo_tracker/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

APP_LOGGER = "todo_tracker"
LOG_FILE_NAME = "todo.log"

_FORMATTER = logging.Formatter(
    fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the interactive menus readable: our own loggers pass through to the
    handler level, everything else (captured 'py.warnings' included) only at ERROR+.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.partition(".")[0] == APP_LOGGER:
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = "data/logs",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Route logging for an interactive menu session.

    stderr shares the screen with the menus, so it only gets this package's
    records at console_level (third-party ones at ERROR+). Everything down to
    file_level goes to <log_dir>/todo.log, which is what the "see the log"
    warnings point the user at. Returns that file's path.
    """
    log_file = Path(log_dir) / LOG_FILE_NAME
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for old in list(root.handlers):
        root.removeHandler(old)

    console = _configured(logging.StreamHandler(sys.stderr), console_level)
    console.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console)
    root.addHandler(_configured(logging.FileHandler(log_file, encoding="utf-8"), file_level))

    # warnings.warn() -> 'py.warnings' logger
    logging.captureWarnings(True)
    return log_file


def _configured(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(_FORMATTER)
    return handler
