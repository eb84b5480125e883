import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, List, Optional

import structlog

from pattern_gallery._package import PACKAGE_NAME_SHORT

_DEFAULT_FORMAT = "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s"
_DEFAULT_LOG_PATH = "logs/pattern-gallery.log"


class DetailedFormatter(logging.Formatter):
    """Formatter that adds the caller's module, function and line to each record."""

    def format(self, record):
        record.caller_info = f"{record.module}.{record.funcName}:{record.lineno}"
        return super().format(record)


def _build_handlers(logging_config: Dict[str, Any]) -> List[logging.Handler]:
    destination = logging_config.get("destination", "stdout")
    log_format = logging_config.get("format") or _DEFAULT_FORMAT
    handlers: List[logging.Handler] = []

    if destination in ("file", "both"):
        file_config = logging_config.get("file", {})
        log_path = os.path.expandvars(file_config.get("path", _DEFAULT_LOG_PATH))
        log_dir = os.path.dirname(log_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=file_config.get("max_size_mb", 10) * 1024 * 1024,
            backupCount=file_config.get("backup_count", 5),
        )
        file_handler.setFormatter(DetailedFormatter(log_format))
        handlers.append(file_handler)

    if destination in ("stdout", "both"):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(DetailedFormatter(log_format))
        handlers.append(console_handler)

    return handlers


def setup_logging(config: Optional[Dict[str, Any]] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application using structlog.

    Args:
        config: Logging section of the application configuration
            (level, destination, format, file). If None, the defaults from
            DEFAULT_CONFIG are used.
    Returns:
        Configured structlog logger instance.
    """
    if config is None:
        from pattern_gallery.config.defaults import DEFAULT_CONFIG
        from pattern_gallery.config.utils.env_expansion import expand_config_env_vars

        config = expand_config_env_vars(DEFAULT_CONFIG)["logging"]

    level_name = str(config.get("level", "WARNING")).upper()
    level = getattr(logging, level_name, logging.WARNING)

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove any existing handlers and add new ones
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    for handler in _build_handlers(config):
        root_logger.addHandler(handler)

    _configure_structlog()

    logger = structlog.get_logger(PACKAGE_NAME_SHORT)
    logger.debug(
        "Logging configured",
        log_level=level_name,
        log_destination=config.get("destination", "stdout"),
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger bound to the given module name."""
    return structlog.get_logger(name)


def _configure_structlog() -> None:
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


# Route structlog through stdlib logging from import time, so records respect
# the root logger's level before setup_logging() runs.
_configure_structlog()
