"""
Logging configuration for the service.

``setup_logging`` installs a single formatter on the root logger and
brings Uvicorn's own loggers to the same level, so request and store
messages end up in one stream.  It only acts on the first call; later
calls (repeated ``create_app`` in tests, or the server entry point after
the app module was imported) leave the existing handlers alone.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> bool:
    """Configure the root logger once.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.  Unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        Also write records to this file when given.

    Returns
    -------
    bool
        ``True`` if handlers were installed by this call.
    """
    root = logging.getLogger()
    if root.handlers:
        return False

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric_level)
    for name in _SERVER_LOGGERS:
        logging.getLogger(name).setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    return True
