"""Logging setup utilities for trigrameyes.

Configures the ``trigrameyes`` package logger from a LoggingConfig. Safe
to call repeatedly: handlers installed by an earlier call are closed and
replaced, and handlers added by anyone else are left alone.
"""

from __future__ import annotations

import logging
import sys

from trigrameyes.config.settings import LoggingConfig

PACKAGE_LOGGER = "trigrameyes"

# Set on every handler created here so a later call can find and replace it
_OWNED_ATTR = "_trigrameyes_owned"


def _build_handlers(config: LoggingConfig) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.file:
        handlers.append(logging.FileHandler(config.file))

    formatter = logging.Formatter(config.format)
    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _OWNED_ATTR, True)
    return handlers


def _remove_owned_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        if getattr(handler, _OWNED_ATTR, False):
            logger.removeHandler(handler)
            handler.close()


def setup_logging(config: LoggingConfig | None = None) -> logging.Logger:
    """Configure logging for the trigrameyes application.

    Args:
        config: Logging configuration. If None, uses defaults
                (INFO level, stderr output).

    Returns:
        The configured package logger.
    """
    config = config or LoggingConfig()

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, config.level.upper(), logging.INFO))

    _remove_owned_handlers(logger)
    for handler in _build_handlers(config):
        logger.addHandler(handler)

    logger.debug("Logging initialized at %s level", config.level)
    return logger
