"""Application logger writing to a rotating file under platformdirs user_log_dir.

The TUI owns the terminal, so nothing is ever logged to stdout/stderr.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "pomotodo_cli"
_LOG_FILE = "pomotodo.log"
_MAX_BYTES = 2 * 1024 * 1024  # 2 MB
_BACKUP_COUNT = 3

_logger: logging.Logger | None = None


def log_file_path() -> Path:
    """Location of the active log file."""
    return Path(user_log_dir(_APP_NAME)) / _LOG_FILE


def get_logger() -> logging.Logger:
    """Return the shared application logger, creating its file handler once."""
    global _logger
    if _logger is not None:
        return _logger

    path = log_file_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        path,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(logging.INFO)
    if not any(
        isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers
    ):
        logger.addHandler(handler)
    logger.propagate = False

    _logger = logger
    return _logger


def set_level(level: str) -> None:
    """Change the logger threshold by level name (e.g. ``"DEBUG"``)."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level}")
    get_logger().setLevel(numeric)
