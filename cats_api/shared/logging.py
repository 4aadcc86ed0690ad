"""
Logging configuration for the application.

Development and test runs log to stdout. Production splits output into
daily rotating files: ``error.log`` keeps a week of errors, ``info.log``
keeps the last day of everything from INFO up.
Never logs sensitive data (request bodies, secrets, passwords).
"""

import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ERROR_LOG_BACKUPS = 7
INFO_LOG_BACKUPS = 1


def _rotating_handler(path: Path, level: int, backups: int) -> logging.Handler:
    handler = TimedRotatingFileHandler(
        path, when="midnight", backupCount=backups, encoding="utf-8"
    )
    handler.setLevel(level)
    return handler


def build_handlers(environment: str, log_dir: str) -> list[logging.Handler]:
    """Select log handlers for the environment.

    Args:
        environment: Runtime environment name.
        log_dir: Directory for the production log files.

    Returns:
        Handlers to attach to the root logger.
    """
    if environment != "production":
        return [logging.StreamHandler(sys.stdout)]

    directory = Path(log_dir)
    directory.mkdir(parents=True, exist_ok=True)
    return [
        _rotating_handler(directory / "error.log", logging.ERROR, ERROR_LOG_BACKUPS),
        _rotating_handler(directory / "info.log", logging.INFO, INFO_LOG_BACKUPS),
    ]


def configure_logging(
    level: str = "INFO", environment: str = "development", log_dir: str = "logs"
) -> None:
    """Configure application logging.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
        environment: Runtime environment; production logs to files.
        log_dir: Directory for production log files.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=build_handlers(environment, log_dir),
        force=True,
    )

    # Request logging middleware already writes one line per request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
