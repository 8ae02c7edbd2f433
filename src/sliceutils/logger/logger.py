"""Global logger configuration for the sliceutils project."""

import logging
import sys
import typing as tp

from pydantic import ValidationError

from sliceutils.core.config import Settings, normalize_level

__all__ = ["logger", "setup_logger"]


def setup_logger(
    name: str = "sliceutils",
    level: str | None = None,
    format_string: str | None = None,
    stream: tp.TextIO | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Values not passed explicitly come from ``Settings.load()``, so
    ``SLICEUTILS_LOG_LEVEL`` and ``SLICEUTILS_LOG_FORMAT`` apply. Invalid
    environment values fall back to the defaults and a warning is logged.

    Args:
        name: Logger name (typically project name)
        level: Log level name or number (DEBUG, INFO, WARN, "10", ...)
        format_string: Custom format string
        stream: Handler output, stdout by default

    Returns:
        Configured logger instance
    """
    invalid_settings = None
    try:
        settings = Settings.load()
    except ValidationError as exc:
        invalid_settings = exc
        settings = Settings()
    if level is not None:
        settings = settings.model_copy(update={"LOG_LEVEL": normalize_level(level)})
    format_string = format_string or settings.LOG_FORMAT

    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setFormatter(
            logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        )
        logger.addHandler(handler)
        logger.setLevel(settings.level_number)
        logger.propagate = False
        if invalid_settings is not None:
            logger.warning(
                f"Ignoring invalid logging settings from the environment, using "
                f"{settings.LOG_LEVEL}: {invalid_settings.errors()[0]['msg']}"
            )

    return logger


# Create default logger instance for the project
logger = setup_logger()
