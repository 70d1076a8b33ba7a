"""Logging setup for applications embedding the CRUD services.

Library modules only ever call logging.getLogger(__name__); handlers are the
application's business. configure_logging() is a convenience for scripts and
services that have no logging configuration of their own.
"""

import logging

from sqla_crud.infrastructure.database import settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str | int | None = None) -> None:
    """Install a root stream handler unless one is already configured.

    level defaults to settings.log_level (LOG_LEVEL in the environment).
    """
    resolved = level if level is not None else settings.log_level
    if isinstance(resolved, str):
        resolved = resolved.upper()
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(resolved)
        return
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
