"""
Logging Configuration Module.

Centralized logging for the Film Query service. Every module logs through
``get_logger(__name__)``; ``setup_logging`` is called once by the server
entry point and wires the root logger.

Features:
- Console logging, plus an optional file log for local runs
- ``simple``, ``detailed`` and ``json`` line formats; the json format tags
  each line with the service name so it can be shipped as-is
- Per-logger levels that keep per-query debug output from the film service
  while muting driver chatter (aiosqlite, asyncpg, SQLAlchemy pool)
"""

import logging
import os
from pathlib import Path
from typing import Optional

_TRUE_VALUES = ("true", "1", "yes")


def _get_logging_config() -> dict:
    """Read logging options from the settings model and the environment.

    The settings import is deferred so this module can be imported by the
    settings' own dependencies.
    """
    try:
        from film_query.server.core.config import settings

        log_level = settings.log_level.upper()
        service_name = settings.app_name
    except Exception:
        # Fallback to environment variables if settings not available
        log_level = os.getenv("FILM_QUERY_LOG_LEVEL", "INFO").upper()
        service_name = os.getenv("FILM_QUERY_APP_NAME", "film-query-service")

    return {
        "log_level": log_level,
        "service_name": service_name,
        "log_format": os.getenv("LOG_FORMAT", "detailed").lower(),
        "log_file_dir": os.getenv("LOG_FILE_DIR", "logs"),
        "log_file_name": os.getenv("LOG_FILE_NAME", "film_query.log"),
        "enable_file_logging": os.getenv("ENABLE_FILE_LOGGING", "false").lower() in _TRUE_VALUES,
    }


_config = _get_logging_config()
LOG_LEVEL = _config["log_level"]
SERVICE_NAME = _config["service_name"]
LOG_FORMAT = _config["log_format"]
LOG_FILE_DIR = _config["log_file_dir"]
LOG_FILE_NAME = _config["log_file_name"]
ENABLE_FILE_LOGGING = _config["enable_file_logging"]

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SIMPLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"

JSON_FORMAT = (
    '{"timestamp": "%(asctime)s", "service": "' + SERVICE_NAME + '", "level": "%(levelname)s", '
    '"logger": "%(name)s", "line": %(lineno)d, "message": "%(message)s"}'
)

LOG_FORMATS = {
    "simple": SIMPLE_FORMAT,
    "detailed": DETAILED_FORMAT,
    "json": JSON_FORMAT,
}

# Per-logger levels. The film service logs each search at DEBUG; database
# drivers log every statement at DEBUG and are held at WARNING.
MODULE_LOG_LEVELS = {
    "film_query": "INFO",
    "film_query.server.services": "DEBUG",
    "film_query.server.api": "INFO",
    "film_query.server.exception_handlers": "INFO",
    "film_query.server.middleware": "INFO",
    "film_query.core.database": "INFO",
    "sqlalchemy.engine": "WARNING",
    "sqlalchemy.pool": "WARNING",
    "aiosqlite": "WARNING",
    "asyncpg": "WARNING",
    "alembic.runtime.migration": "INFO",
    # Request timing is logged by LogfireMiddleware
    "uvicorn.access": "WARNING",
    "uvicorn.error": "INFO",
    "logfire": "WARNING",
}


def resolve_format(fmt: str) -> str:
    """Map a format name to its format string; unknown names use ``detailed``."""
    return LOG_FORMATS.get(fmt.lower(), DETAILED_FORMAT)


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    enable_file: bool = True,
) -> None:
    """
    Configure logging for the service.

    Args:
        log_level: Override default log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Override default format (simple, detailed, json)
        enable_file: Whether to enable file logging; the file is only written
            when ``ENABLE_FILE_LOGGING`` is also set
    """
    level = (log_level or LOG_LEVEL).upper()
    fmt = log_format or LOG_FORMAT

    formatter = logging.Formatter(resolve_format(fmt), datefmt=DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    file_logging = enable_file and ENABLE_FILE_LOGGING
    if file_logging:
        Path(LOG_FILE_DIR).mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(Path(LOG_FILE_DIR) / LOG_FILE_NAME)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    for module_name, module_level in MODULE_LOG_LEVELS.items():
        logging.getLogger(module_name).setLevel(module_level)

    root_logger.info(
        f"Logging configured: service={SERVICE_NAME}, level={level}, format={fmt}, file_logging={file_logging}"
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: The module name (typically __name__)

    Returns:
        A configured logger instance
    """
    return logging.getLogger(name)
