"""Process-wide ``protter`` logger."""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .profiles import _work_dir

LOGGER_NAME = "protter"
LOG_FILE_NAME = "app.log"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_MAX_BYTES = 2 * 1024 * 1024
LOG_BACKUP_COUNT = 3

_LOGGER: logging.Logger | None = None


def _build_handlers(log_path: Path) -> list[logging.Handler]:
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=LOG_MAX_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    # stdout is reserved for project names and upload lines
    console = logging.StreamHandler(sys.stderr)
    for handler in (file_handler, console):
        handler.setFormatter(formatter)
    return [file_handler, console]


def get_logger(log_dir: Path | None = None) -> logging.Logger:
    """Return the shared ``protter`` logger, set up on first use.

    Records go to stderr and to ``logs/app.log`` under the protter home
    (``PROTTER_HOME`` or ``~/.protter``) unless ``log_dir`` names another
    directory. Later calls return the same logger and ignore ``log_dir``.
    """

    global _LOGGER
    if _LOGGER is not None:
        return _LOGGER

    target = Path(log_dir) if log_dir is not None else _work_dir() / "logs"
    target.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    for handler in _build_handlers(target / LOG_FILE_NAME):
        logger.addHandler(handler)

    _LOGGER = logger
    return logger


def set_level(level: str | int) -> None:
    """Adjust the level of the application logger and all of its handlers."""

    logger = get_logger()
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)
