"""Package logger configuration."""

from __future__ import annotations

import logging
import sys

from .config import load_settings

__all__ = ["logger", "setup_logger"]

_DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(
    name: str = "core_extra",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return the package logger.

    Args:
        name: Logger name; submodules log through `core_extra.<module>` children.
        level: Log level name, defaults to `CORE_EXTRA_LOG_LEVEL` or WARNING.
        format_string: Custom format string.

    Returns:
        Configured logger instance.
    """
    level = level or load_settings().log_level
    format_string = format_string or _DEFAULT_FORMAT

    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
        logger.propagate = False

    return logger


logger = setup_logger()
