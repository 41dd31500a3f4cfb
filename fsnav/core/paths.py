from __future__ import annotations

from pathlib import Path

from platformdirs import user_log_path

APP_NAME = "fsnav"
APP_AUTHOR = "fsnav"
LOG_FILENAME = "session.log"


def default_log_dir() -> Path:
    return Path(user_log_path(APP_NAME, APP_AUTHOR))
