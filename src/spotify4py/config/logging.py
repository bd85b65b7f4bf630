"""Logging setup for the spotify4py command line."""

from __future__ import annotations

import logging

# Libraries that log every request at INFO.
_CHATTY_LOGGERS = ("httpx", "httpcore")


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Initialise the root logger for CLI output.

    Request lines from httpx are only shown at DEBUG, next to the client's own
    ``GET <path>`` debug lines. Pass ``force=True`` to reconfigure an already
    configured root logger.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(level if level <= logging.DEBUG else logging.WARNING)
