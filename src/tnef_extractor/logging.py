"""
Logging helpers for applications embedding the reader.

Logging is opt-in: importing the package installs no handlers.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from . import config

PACKAGE_LOGGER = "tnef_extractor"

_FILE_HANDLER: RotatingFileHandler | None = None
_STREAM_HANDLER: logging.StreamHandler | None = None


def _install_handlers(log_path: Path) -> Path:
    """Configure rotating file and console handlers."""
    global _FILE_HANDLER, _STREAM_HANDLER

    logger = logging.getLogger(PACKAGE_LOGGER)
    log_target = log_path.expanduser()
    log_target.parent.mkdir(parents=True, exist_ok=True)

    if _FILE_HANDLER:
        logger.removeHandler(_FILE_HANDLER)
        _FILE_HANDLER.close()
    _FILE_HANDLER = RotatingFileHandler(
        log_target,
        maxBytes=1_048_576,
        backupCount=3,
        encoding="utf-8",
    )
    _FILE_HANDLER.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(message)s"))
    logger.addHandler(_FILE_HANDLER)

    if _STREAM_HANDLER is None:
        _STREAM_HANDLER = logging.StreamHandler()
        _STREAM_HANDLER.setFormatter(logging.Formatter("%(levelname)s - %(message)s"))
        logger.addHandler(_STREAM_HANDLER)

    logger.propagate = False
    return log_target


def configure_logging(log_file: str | Path | None = None, level: int | None = None) -> Path:
    """
    Configure package logging handlers.

    Args:
        log_file: Optional path for the rotating log file. Defaults to
            :data:`config.DEFAULT_LOG_FILE`.
        level: Optional logging level override (INFO otherwise).

    Returns:
        Path to the active log file.
    """
    if log_file is None:
        config.ensure_app_directories()
        log_path = config.DEFAULT_LOG_FILE
    else:
        log_path = Path(log_file)

    path = _install_handlers(log_path)
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level if level is not None else logging.INFO)
    logger.info("Logging configured. Writing to %s", path)
    return path


def get_logger(name: str = PACKAGE_LOGGER) -> logging.Logger:
    """Return a namespaced logger."""
    return logging.getLogger(name)
