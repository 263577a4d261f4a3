"""
Logging for the Forex Alert Feed service.

One loguru logger is shared by the API, the refresh scheduler and the
generation path. Uvicorn, APScheduler and httpx log through the standard
library; their records are forwarded here so a single sink sees everything.

Usage:
    from utils import logger

    logger.info(f"Ranked {len(ranked)} articles, threshold {threshold}")
    logger.warning(f"Primary generation failed, falling back: {e}")
"""
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional

from loguru import logger

logger.remove()

_configured = False

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}"

# Third-party libraries that log through the standard library
STDLIB_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "apscheduler", "httpx")


class InterceptHandler(logging.Handler):
    """Forward standard library log records to loguru, keeping the origin logger name."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        logger.bind(origin=record.name).opt(exception=record.exc_info).log(level, record.getMessage())


def intercept_stdlib_logging(names: Iterable[str] = STDLIB_LOGGERS) -> None:
    """Route the named standard library loggers into loguru."""
    for name in names:
        std_logger = logging.getLogger(name)
        std_logger.handlers = [InterceptHandler()]
        std_logger.propagate = False


def setup_logging(log_dir: Optional[Path] = None, log_level: str = "INFO", app_name: str = "feed"):
    """
    Configure the console sink and, when log_dir is given, a daily log file.

    Args:
        log_dir: Directory for "{app_name}_{date}.log" files; None disables file logging
        log_level: Minimum console level
        app_name: "api" or "scheduler", used as the file prefix
    """
    global _configured

    if _configured:
        return

    logger.add(sys.stderr, level=log_level, format=CONSOLE_FORMAT)

    if log_dir:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        # Rotates at midnight, gzip after rotation
        logger.add(
            log_dir / f"{app_name}_{{time:YYYY-MM-DD}}.log",
            level="INFO",
            format=FILE_FORMAT,
            rotation="00:00",
            retention="30 days",
            compression="gz",
            encoding="utf-8",
        )
        logger.info(f"{app_name} logging to {log_dir}")

    intercept_stdlib_logging()
    _configured = True


def init_logging(app_name: str = "feed"):
    """Configure logging from settings; called once by the API lifespan and the scheduler."""
    from config import settings, ensure_directories

    ensure_directories()
    setup_logging(log_dir=settings.LOG_DIR, log_level=settings.LOG_LEVEL, app_name=app_name)


__all__ = ["logger", "setup_logging", "init_logging", "intercept_stdlib_logging", "InterceptHandler"]
