"""Mini README: Application-wide logging helpers for Budget Board.

Structure:
    * configure_root_logger - attach the shared stream handler once.
    * set_log_level - adjust the level later, e.g. from ``BUDGETBOARD_LOG_LEVEL``.
    * get_logger - module logger factory used as ``LOGGER = get_logger(__name__)``.

Usage:
    Every module creates its logger at import time. Configuration happens on
    the first call so reloading modules under the development server does not
    stack duplicate handlers. Levels may be given as ints or names ("debug").
"""

from __future__ import annotations

import logging
from typing import Optional, Union

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"

_handler: Optional[logging.Handler] = None


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def configure_root_logger(level: Union[int, str] = logging.INFO) -> None:
    """Attach the budget board handler to the root logger if it is missing."""

    global _handler
    if _handler is not None:
        return

    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root_logger = logging.getLogger()
    root_logger.setLevel(_resolve_level(level))
    root_logger.addHandler(_handler)


def set_log_level(level: Union[int, str]) -> None:
    """Change the root level, configuring logging first when needed."""

    configure_root_logger(level)
    logging.getLogger().setLevel(_resolve_level(level))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    configure_root_logger()
    return logging.getLogger(name)
