"""
Logging configuration for the application.

``setup_logging`` attaches a console handler, and optionally a file
handler, to the root logger the first time it is called.  Later calls
are no-ops so that test runners and repeated ``create_app`` calls keep
whatever handlers are already installed.

The application writes its own access log in development (see
``core.middleware``), so ``quiet_server_access_log`` lets the caller
silence Uvicorn's equivalent to avoid duplicate lines.
"""

import logging
from pathlib import Path
from typing import List, Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _build_handlers(logfile: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> bool:
    """Configure the root logger once.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file that receives a copy of every record, resolved
        against the current working directory.

    Returns
    -------
    bool
        ``True`` if handlers were installed by this call.
    """
    root = logging.getLogger()
    if root.handlers:
        return False

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _build_handlers(logfile):
        handler.setFormatter(formatter)
        root.addHandler(handler)
    return True


def quiet_server_access_log() -> None:
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
