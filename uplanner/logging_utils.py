"""Mini README: Application-wide logging helpers for uplanner.

Structure:
    * configure_root_logger - install the shared console handler, or retune it.
    * level_for_environment - default level for a settings environment label.
    * get_logger - factory returning module loggers with baseline setup.

Usage:
    Every module creates ``LOGGER = get_logger(__name__)``. Per-segment
    geometry is logged at DEBUG, pipeline milestones at INFO, skipped rows
    and files at WARNING and aborted trajectories at ERROR. The CLI raises
    the level with ``--verbose``; the service derives it from
    ``UPLANNER_ENVIRONMENT``.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_ENVIRONMENT_LEVELS = {
    "development": logging.DEBUG,
    "testing": logging.INFO,
    "production": logging.WARNING,
}

_HANDLER: Optional[logging.Handler] = None


def level_for_environment(environment: str) -> int:
    """Map an environment label to a logging level, INFO when unrecognised."""

    return _ENVIRONMENT_LEVELS.get(environment.strip().lower(), logging.INFO)


def configure_root_logger(level: Union[int, str] = logging.INFO) -> logging.Handler:
    """Attach the console handler to the root logger and set ``level``.

    Only one handler is ever installed; later calls adjust the level so the
    CLI can switch to DEBUG after modules have already created loggers.
    """

    global _HANDLER
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown logging level '{level}'")
        level = resolved

    root_logger = logging.getLogger()
    if _HANDLER is None:
        _HANDLER = logging.StreamHandler()
        _HANDLER.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(_HANDLER)
    root_logger.setLevel(level)
    return _HANDLER


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module logger, installing the console handler on first use."""

    if _HANDLER is None:
        configure_root_logger()
    return logging.getLogger(name)
