"""
Logging setup shared by the application and the uvicorn launcher.

``normalize_level`` turns whatever ``LOG_LEVEL`` holds into one of the
names uvicorn understands, so the same value can be handed to
``uvicorn.Config`` and to ``setup_logging`` without either of them
failing on spellings such as ``WARN`` or ``fatal``.  ``setup_logging``
then sends the server's own loggers through the root handlers, so
access lines and application lines share one format.
"""

import logging
from pathlib import Path
from typing import Optional

TRACE_LEVEL = 5

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Names accepted by ``uvicorn.Config(log_level=...)``.
LEVELS = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": TRACE_LEVEL,
}

_ALIASES = {"warn": "warning", "fatal": "critical"}

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def normalize_level(level: Optional[str]) -> str:
    """Return the uvicorn level name for ``level``.

    Matching is case insensitive, ``warn`` and ``fatal`` are accepted
    as aliases and anything unrecognised becomes ``"info"``.
    """
    name = (level or "").strip().lower()
    name = _ALIASES.get(name, name)
    return name if name in LEVELS else "info"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure root logger.

    Uvicorn's loggers lose their own handlers and propagate to the
    root logger.  If the root logger has no handlers yet, a console
    handler and optionally a file handler are attached; otherwise the
    existing configuration is left alone, which keeps repeated
    ``create_app`` calls from stacking handlers.

    Parameters
    ----------
    level : str
        Logging level name, normalised with ``normalize_level``.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted, no file
        handler is added.
    """
    for name in UVICORN_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True

    logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(LEVELS[normalize_level(level)])

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
