"""
Logging setup for the todo registry service.

``create_app`` calls ``setup_logging`` once with ``LOG_LEVEL`` and
``LOG_FILE`` from the settings.  Log levels used across the service:

* INFO: registry mutations (todo created, updated, deleted).
* DEBUG: expected ``Err`` replies (unknown id, full registry, empty
  page) and every dispatched call.
* WARNING: calls rejected by the dispatcher before reaching the registry.
* ERROR: client-side transport failures in ``todo_client``.

Records go to stderr and, when ``LOG_FILE`` is set, to that file as well.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: str) -> int:
    numeric_level = logging.getLevelName(level.upper())
    # getLevelName returns a "Level X" string for names it does not know.
    return numeric_level if isinstance(numeric_level, int) else logging.INFO


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach the service handlers to the root logger.

    Does nothing when the root logger already has handlers, so building
    several apps in one process (as the tests do) leaves a single set of
    handlers in place.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"``; case insensitive, unknown names
        mean ``INFO``.
    logfile : Optional[str]
        Extra file to write records to, resolved against the working
        directory.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(_resolve_level(level))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
