"""
Logging setup for the Student Records API.

``setup_logging`` installs handlers on the root logger from a
``Settings`` object: always a console handler, plus a size‑rotated file
handler when ``settings.log_file`` is set.  ``settings.debug`` forces
``DEBUG`` regardless of ``log_level``.  Uvicorn's own loggers are left
alone so that ``run.py`` keeps its access log format.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(settings: Settings) -> int:
    """Return the numeric level for ``settings``; unknown names mean ``INFO``."""
    if settings.debug:
        return logging.DEBUG
    level = logging.getLevelName(settings.log_level.upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure the root logger once.

    A second call, or a call after something else (pytest, uvicorn's
    ``--log-config``) has attached handlers, changes nothing.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(resolve_level(settings))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if settings.log_file:
        file_handler = RotatingFileHandler(
            Path(settings.log_file).resolve(),
            maxBytes=settings.log_max_bytes,
            backupCount=settings.log_backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
