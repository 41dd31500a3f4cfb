from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from fsnav.core.paths import LOG_FILENAME


def get_logger(name: str = "fsnav") -> logging.Logger:
    return logging.getLogger(name)


def configure_logging(
    *,
    level: str = "info",
    format_name: str = "json",
    stream=None,
    log_dir: Path | None = None,
    filename: str = LOG_FILENAME,
) -> None:
    normalized = level.strip().upper()
    level_value = getattr(logging, normalized, logging.INFO)
    if format_name == "json":
        formatter = logging.Formatter("%(message)s")
    else:
        formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    root = logging.getLogger()
    root.setLevel(level_value)
    if stream is None:
        # The terminal belongs to the browser, so without a log dir nothing is emitted.
        if log_dir is None:
            if not root.handlers:
                root.addHandler(logging.NullHandler())
            return
        log_dir.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(
            log_dir / filename, mode="a", encoding="utf-8"
        )
    else:
        handler = logging.StreamHandler(stream)
    handler.setFormatter(formatter)
    if not root.handlers:
        root.addHandler(handler)


def log_event(logger: logging.Logger, event: str, **fields: Any) -> None:
    payload = {"event": event, **{key: _jsonable(value) for key, value in fields.items()}}
    logger.info(json.dumps(payload, sort_keys=True))


def _jsonable(value: Any) -> Any:
    if isinstance(value, Path):
        return str(value)
    return value
