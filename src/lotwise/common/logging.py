"""Logging setup for the lotwise CLI."""

from __future__ import annotations

import logging

# Chatty HTTP stack loggers, only useful when debugging lookups
NOISY_LOGGERS = ("httpx", "httpcore", "hishel")
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Initialise the root logger with a terse format for terminal output.

    Below DEBUG the HTTP stack loggers are raised to WARNING so a lookup does not
    print a line per request. ``force=True`` replaces existing handlers.
    """

    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S", force=force)
    if level > logging.DEBUG:
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
