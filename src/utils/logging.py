"""Logging setup for the documentation generator.

Application modules log under the ``src`` package logger. The API SDKs
and their HTTP transport log under their own names; their records are
sent to the same handlers, held at WARNING unless debugging, so request
failures show up next to the per-file progress lines.
"""

import logging
import sys
from typing import Optional

_APP_LOGGER = "src"
_SDK_LOGGERS = ("openai", "anthropic", "httpx")

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _build_handlers(
    level: int, log_format: str, log_file: Optional[str]
) -> list[logging.Handler]:
    formatter = logging.Formatter(log_format)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
    return handlers


def _attach(logger: logging.Logger, level: int, handlers: list[logging.Handler]) -> None:
    for old in logger.handlers:
        old.close()
    logger.handlers.clear()
    logger.setLevel(level)
    for handler in handlers:
        logger.addHandler(handler)


def setup_logging(
    level: str = "INFO",
    log_format: str = DEFAULT_FORMAT,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """Configure application and SDK logging.

    Safe to call more than once: each call replaces the handlers of the
    previous one, so the CLI can start with defaults and reconfigure
    after the config file is read.

    Args:
        level: Logging level string (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Format string for log messages.
        log_file: Optional file path for log output. If None, logs only
            to the console.

    Returns:
        The configured application logger.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    handlers = _build_handlers(numeric_level, log_format, log_file)

    app_logger = logging.getLogger(_APP_LOGGER)
    _attach(app_logger, numeric_level, handlers)

    sdk_level = max(numeric_level, logging.WARNING)
    if numeric_level <= logging.DEBUG:
        sdk_level = logging.DEBUG
    for name in _SDK_LOGGERS:
        sdk_logger = logging.getLogger(name)
        _attach(sdk_logger, sdk_level, handlers)
        sdk_logger.propagate = False

    app_logger.debug("Logging initialized at level %s", level)
    return app_logger
