"""Logging helpers for the pygeodepth library.

Library modules only ever call :func:`get_logger` with ``__name__``;
handlers are left to the application.  Scripts and examples that want
console output call :func:`configure_logging`, which touches the
``pygeodepth`` logger only (never the root logger).

Example::

    from pygeodepth.utils.logging import configure_logging
    configure_logging(level="DEBUG")
"""

from __future__ import annotations

import logging
import os
import sys

DEFAULT_FMT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"
ROOT_LOGGER = "pygeodepth"
LEVEL_ENV_VAR = "PYGEODEPTH_LOG_LEVEL"


def configure_logging(
    level: str | int | None = None,
    *,
    fmt: str | None = None,
    datefmt: str | None = None,
    force: bool = False,
) -> logging.Logger:
    """Attach a stderr handler to the ``pygeodepth`` logger.

    Args:
        level: Logging level name or number.  Defaults to the
            ``PYGEODEPTH_LOG_LEVEL`` environment variable, or ``"INFO"``.
        fmt: Record format.  Defaults to :data:`DEFAULT_FMT`.
        datefmt: Timestamp format.  Defaults to :data:`DEFAULT_DATEFMT`.
        force: Remove existing handlers first.  Otherwise an already
            attached stderr handler is kept and no second one is added.

    Returns:
        The configured package logger.
    """
    if level is None:
        level = os.environ.get(LEVEL_ENV_VAR, "INFO")
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)

    if force:
        for h in logger.handlers[:]:
            h.close()
            logger.removeHandler(h)
    else:
        for h in logger.handlers:
            if isinstance(h, logging.StreamHandler) and h.stream is sys.stderr:
                return logger

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(
        logging.Formatter(fmt=fmt or DEFAULT_FMT, datefmt=datefmt or DEFAULT_DATEFMT)
    )
    logger.addHandler(console)
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``logging.getLogger(name)``, the package logger if *name* is ``None``."""
    return logging.getLogger(name or ROOT_LOGGER)
