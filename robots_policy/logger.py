# robots_policy/logger.py
"""Project logger for **robots_policy**.

Import the shared instance::

    from robots_policy.logger import logger

The CLI rebuilds its handlers with :func:`init_logging` from ``--log-*`` options.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOGGER_NAME: Final[str] = "RobotsPolicy"

_MAX_LOG_BYTES: Final[int] = 5 * 1024 * 1024
_LOG_BACKUPS: Final[int] = 3


def init_logging(
    level: Union[int, str] = "WARNING",
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Replace the handlers of the ``RobotsPolicy`` logger.

    Records go to stderr (stdout carries command output) and, if *log_file*
    is given, to a rotating file as well.
    """
    formatter = logging.Formatter(log_format)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        handlers.append(
            RotatingFileHandler(
                filename=str(log_file),
                maxBytes=_MAX_LOG_BYTES,
                backupCount=_LOG_BACKUPS,
                encoding="utf-8",
            )
        )

    lg = logging.getLogger(LOGGER_NAME)
    lg.setLevel(level)
    for old in list(lg.handlers):
        lg.removeHandler(old)
        old.close()
    for handler in handlers:
        handler.setFormatter(formatter)
        lg.addHandler(handler)
    lg.propagate = False
    return lg


logger: logging.Logger = init_logging()

__all__ = ["logger", "init_logging", "DEFAULT_FORMAT", "LOGGER_NAME"]
