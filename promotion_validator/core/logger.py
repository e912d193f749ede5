"""
Service logger setup

Console logging to stderr plus an optional log file, configured from
LoggingConfig. Calling setup_service_logger again replaces the handlers
it installed earlier instead of stacking new ones.
"""
import logging
import sys
from typing import List, Optional

from .config import LoggingConfig, get_settings

# Handlers this module attached to the root logger
_installed_handlers: List[logging.Handler] = []


def installed_handlers() -> List[logging.Handler]:
    """Handlers currently installed by setup_service_logger"""
    return list(_installed_handlers)


def reset_service_logger() -> None:
    """Detach and close the handlers installed by setup_service_logger"""
    root = logging.getLogger()
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root.removeHandler(handler)
        handler.close()


def _install(root: logging.Logger, handler: logging.Handler, formatter: logging.Formatter) -> None:
    handler.setFormatter(formatter)
    root.addHandler(handler)
    _installed_handlers.append(handler)


def setup_service_logger(
    service_name: str,
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    config: Optional[LoggingConfig] = None,
) -> logging.Logger:
    """
    Configure logging for a service entry point

    Handlers are attached to the root logger so module loggers
    (logging.getLogger(__name__)) propagate to them.

    Args:
        service_name: Name of the returned logger
        level: Log level name, overrides config
        log_file: Log file path, overrides config
        config: Logging config (global settings if not provided)

    Returns:
        Logger named after the service
    """
    if config is None:
        config = get_settings().logging

    level_name = (level or config.log_level or "INFO").upper()
    log_level = getattr(logging, level_name, logging.INFO)
    if not isinstance(log_level, int):
        log_level = logging.INFO
    formatter = logging.Formatter(config.log_format)

    reset_service_logger()

    root = logging.getLogger()
    _install(root, logging.StreamHandler(sys.stderr), formatter)

    file_path = log_file or config.log_file
    if file_path:
        _install(root, logging.FileHandler(file_path, encoding="utf-8"), formatter)

    root.setLevel(log_level)

    logger = logging.getLogger(service_name)
    logger.setLevel(log_level)
    return logger


__all__ = ["setup_service_logger", "reset_service_logger", "installed_handlers"]
