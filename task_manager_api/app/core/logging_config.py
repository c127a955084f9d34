"""
Logging configuration for the Task Manager API.

All application modules log through ``logging.getLogger(__name__)``;
``setup_logging`` gives those records a single format and destination.
Uvicorn's own loggers are pointed at the same handlers so server and
application lines look alike in one stream, and the MongoDB driver is
kept at WARNING unless the service itself runs at DEBUG.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_DRIVER_LOGGERS = ("pymongo", "motor")
_SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

_configured = False


def _build_handlers(logfile: Optional[str]) -> List[logging.Handler]:
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure logging for the service; later calls are no‑ops.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"`` or ``"info"``.  Unknown names
        fall back to ``INFO``.
    logfile : Optional[str]
        Optional file receiving a copy of every record.
    """
    global _configured
    if _configured:
        return
    _configured = True

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(numeric_level)
    # Leave handlers installed by a host process (test runner, embedding app).
    if not root.handlers:
        for handler in _build_handlers(logfile):
            root.addHandler(handler)

    for name in _SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True

    if numeric_level > logging.DEBUG:
        for name in _DRIVER_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
