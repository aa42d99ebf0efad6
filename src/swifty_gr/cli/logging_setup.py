"""Logging configuration for the CLI layer.

Core modules only *emit* records through ``logging.getLogger(__name__)``;
this module is the single place that attaches a handler.  Records go to
stderr so they never mix with command output on stdout.
"""

from __future__ import annotations

import logging
import sys

LOG_LEVELS: tuple[str, ...] = ("debug", "info", "warning", "error")
DEFAULT_LOG_LEVEL: str = "warning"

_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Route ``swifty_gr`` log records to stderr at *level*.

    Safe to call more than once; the previous handler is replaced.
    """
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger("swifty_gr")
    for handler in list(logger.handlers):
        if getattr(handler, "_swifty_gr", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler._swifty_gr = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(numeric)
