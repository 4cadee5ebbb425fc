# src/todo_tracker/config.py

"""TODO_* environment settings, read once per process (a local .env is honoured).

Nothing is required: with an empty environment the tasks file lands in
<checkout>/data/tasks.json (~/.todo_tracker/tasks.json for a wheel install)
and logs in a logs/ dir next to it.
"""

from __future__ import annotations

import functools
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"

# src/todo_tracker/config.py -> project root (source checkout or editable install)
INSTALL_ROOT = Path(__file__).resolve().parent.parent.parent
USER_DATA_DIR = Path.home() / ".todo_tracker"


def default_data_dir(root: Path | None = None) -> Path:
    """
    <root>/data when running from a checkout (root holds pyproject.toml).

    A wheel install puts the package under site-packages, where the "root" is the
    interpreter's lib dir; tasks then go to ~/.todo_tracker instead.
    """
    root = root or INSTALL_ROOT
    if (root / "pyproject.toml").is_file():
        return root / "data"
    return USER_DATA_DIR


def _k(suffix: str) -> str:
    """APP_NAME -> TODO_APP_NAME."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw.strip()).expanduser()


def _env_level(name: str, default: str) -> str:
    raw = _env(name, default).upper()
    return raw if isinstance(logging.getLevelName(raw), int) else default


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    user_name: str
    log_level: str

    # ---- Console ----
    clear_screen: bool

    # ---- Local data paths ----
    data_dir: Path
    tasks_path: Path
    log_dir: Path

    @property
    def console_level(self) -> int:
        return logging.getLevelName(self.log_level)

    @staticmethod
    def from_env() -> Settings:
        app_name = _env(_k("APP_NAME"), "todo")
        user_name = _env(_k("USER_NAME"), "there")
        log_level = _env_level(_k("LOG_LEVEL"), "WARNING")

        clear_screen = _env_bool(_k("CLEAR_SCREEN"), True)

        data_dir = _env_path(_k("DATA_DIR"), default_data_dir())
        tasks_path = _env_path(_k("TASKS_PATH"), data_dir / "tasks.json")
        log_dir = _env_path(_k("LOG_DIR"), data_dir / "logs")

        return Settings(
            app_name=app_name,
            user_name=user_name,
            log_level=log_level,
            clear_screen=clear_screen,
            data_dir=data_dir,
            tasks_path=tasks_path,
            log_dir=log_dir,
        )


@functools.cache
def get_settings() -> Settings:
    """Load .env (without overriding real env vars) and build Settings once."""
    load_dotenv(override=False)
    return Settings.from_env()
