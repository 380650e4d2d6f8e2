"""Mini README: Application-wide logging helpers for Pennywise.

Structure:
    * configure_root_logger - one-time root handler setup, level adjustable.
    * get_logger - factory returning module loggers after configuration.

Usage:
    Modules create ``LOGGER = get_logger(__name__)`` at import time, which
    installs a single stream handler at INFO. Entry points such as the CLI
    call ``configure_root_logger(settings.log_level)`` to apply the
    configured level; later calls only adjust the level, so repeated
    imports never stack duplicate handlers.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def _resolve_level(level: Union[int, str]) -> int:
    """Translate a level name or number into the logging constant."""

    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def configure_root_logger(level: Optional[Union[int, str]] = None) -> None:
    """Configure the root logger with a compact, ledger friendly formatter."""

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    if _LOGGER_INITIALISED:
        if level is not None:
            root_logger.setLevel(_resolve_level(level))
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger.setLevel(_resolve_level(logging.INFO if level is None else level))
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    configure_root_logger()
    return logging.getLogger(name)
