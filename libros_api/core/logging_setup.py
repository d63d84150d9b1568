"""Loguru setup: one stderr sink plus a bridge for stdlib ``logging`` records."""
from __future__ import annotations

import logging
import sys

from loguru import logger

from .config import get_settings

DEFAULT_LEVEL = "INFO"

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


class InterceptHandler(logging.Handler):
    """Redirect standard 'logging' records (uvicorn, sqlalchemy) to Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # report the caller that emitted the record, not the logging module
        frame, depth = sys._getframe(1), 1
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def resolve_level(name: str) -> str:
    """Return ``name`` if loguru knows the level, else DEFAULT_LEVEL."""
    try:
        return logger.level(name).name
    except ValueError:
        return DEFAULT_LEVEL


def configure_logging() -> None:
    settings = get_settings()
    verbose = settings.app_env != "prod"
    level = resolve_level(settings.log_level)

    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format=LOG_FORMAT,
        colorize=True,
        backtrace=verbose,
        diagnose=verbose,
    )
    if level != settings.log_level:
        logger.warning("Unknown LOG_LEVEL {!r}, using {}", settings.log_level, level)

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in list(logging.root.manager.loggerDict.keys()):
        stdlog = logging.getLogger(name)
        stdlog.handlers = []
        stdlog.propagate = True

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    logger.debug("Logging configured (level={}, env={})", level, settings.app_env)
