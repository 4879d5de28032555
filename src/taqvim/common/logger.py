"""Logging setup for TAQVIM.

:class:`.Logger` attaches one handler to a named :mod:`logging` logger, chosen by the
``[logging]`` section of the behavioral config: standard output, or a size-rotated
log file in a directory. The ``taqvimLog*`` helpers write to the top-level
``"taqvim"`` logger without any setup.
"""

from __future__ import annotations

# Standard Library Imports
import logging
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Local Imports
from .behavioral_config import BehavioralConfig

LOG_FORMAT: str = "%(asctime)s - %(module)s - %(levelname)s - %(message)s"

STDOUT: str = "stdout"
"""``str``: ``OutputLocation`` value selecting standard output instead of a directory."""


def logFileStamp(moment: datetime | None = None) -> str:
    """Return a compact UTC timestamp usable in a file name, e.g. ``20251227T093015000000Z``."""
    if moment is None:
        moment = datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).strftime("%Y%m%dT%H%M%S%fZ")


def _rotatingFileHandler(name: str, directory: str) -> RotatingFileHandler:
    log_dir = Path(directory)
    if not log_dir.exists():
        logging.getLogger(name).info(f"Creating log directory: {directory!r}")
        log_dir.mkdir(parents=True)

    settings = BehavioralConfig.getConfig().logging
    return RotatingFileHandler(
        log_dir / f"{name}_{logFileStamp()}.log",
        maxBytes=settings.MaxFileSize,
        backupCount=settings.MaxFileCount,
        encoding="utf-8",
    )


class Logger:
    """Named logger with a handler picked from the behavioral config.

    Attribute access falls through to the wrapped :class:`logging.Logger`, so an instance
    is used exactly like one: ``Logger("taqvim").info("...")``.

    Attributes:
        logger (:class:`logging.Logger`): the wrapped logger
        filename (``str`` | ``None``): log file path, ``"stdout"``, or ``None`` when this
            instance reused a logger that already had a handler
    """

    def __init__(self, name, level=None, path=None, allow_multiple_handlers=None):
        """Attach a handler to the logger called `name` unless it already has one.

        Args:
            name (``str``): logger name
            level (``int``, optional): minimum level published. Defaults to ``[logging] Level``.
            path (``str``, optional): log directory, or ``"stdout"``. Defaults to
                ``[logging] OutputLocation``.
            allow_multiple_handlers (``bool``, optional): attach another handler even if the
                logger has one. Defaults to ``[logging] AllowMultipleHandlers``.
        """
        settings = BehavioralConfig.getConfig().logging
        level = level or settings.Level
        path = path or settings.OutputLocation
        if allow_multiple_handlers is None:
            allow_multiple_handlers = settings.AllowMultipleHandlers

        self.logger = logging.getLogger(name)
        self.filename = None
        if self.logger.handlers and not allow_multiple_handlers:
            return

        if path == STDOUT:
            handler = logging.StreamHandler(sys.stdout)
            self.filename = STDOUT
        else:
            handler = _rotatingFileHandler(name, path)
            self.filename = handler.baseFilename

        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        self.logger.setLevel(level)
        self.logger.addHandler(handler)

    def __getattr__(self, name):
        """."""
        return getattr(self.logger, name)


def _taqvimLog(message: str, level: int):
    """Write `message` at `level` to the top-level ``"taqvim"`` logger.

    Args:
        message (``str``): text to log
        level (``int``): :mod:`logging` level constant
    """
    logging.getLogger("taqvim").log(level, message)


def taqvimLogCritical(message: str):
    """Log `message` at CRITICAL level. See :func:`._taqvimLog`."""
    _taqvimLog(message, logging.CRITICAL)


def taqvimLogError(message: str):
    """Log `message` at ERROR level. See :func:`._taqvimLog`."""
    _taqvimLog(message, logging.ERROR)


def taqvimLogWarning(message: str):
    """Log `message` at WARNING level. See :func:`._taqvimLog`."""
    _taqvimLog(message, logging.WARNING)


def taqvimLogInfo(message: str):
    """Log `message` at INFO level. See :func:`._taqvimLog`."""
    _taqvimLog(message, logging.INFO)


def taqvimLogDebug(message: str):
    """Log `message` at DEBUG level. See :func:`._taqvimLog`."""
    _taqvimLog(message, logging.DEBUG)


def taqvimLogNotSet(message: str):
    """Log `message` at NOTSET level. See :func:`._taqvimLog`."""
    _taqvimLog(message, logging.NOTSET)
