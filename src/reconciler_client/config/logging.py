"""Root logger setup used by the ``reconciler-client`` command."""

from __future__ import annotations

import logging

_CHATTY_LOGGERS = ("httpx", "httpcore")


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Send log records to stderr with timestamps and the emitting module.

    The client already logs each reconciler exchange, so the HTTP libraries are held
    at WARNING unless DEBUG output was requested.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    library_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(library_level)
