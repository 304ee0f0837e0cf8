"""
Logging setup for the Signup Server.

Level names are resolved against uvicorn's own table, so the value of
``LOG_LEVEL`` always means the same thing to the application loggers
and to the uvicorn server.  Names uvicorn does not know fall back to
``info``.
"""

import logging
from pathlib import Path

from uvicorn.config import LOG_LEVELS

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(name: str) -> str:
    """Return ``name`` as a uvicorn level name, or ``"info"`` if unknown."""
    key = (name or "").strip().lower()
    return key if key in LOG_LEVELS else "info"


def setup_logging(cfg: Settings) -> str:
    """Attach console (and optional file) handlers to the root logger.

    Does nothing to the handlers if the root logger already has some.
    Returns the resolved level name so the caller can hand the same
    value to uvicorn.
    """
    level = resolve_level(cfg.log_level)
    root = logging.getLogger()
    if root.handlers:
        return level

    root.setLevel(LOG_LEVELS[level])
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if cfg.log_file:
        handlers.append(logging.FileHandler(Path(cfg.log_file).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    return level
