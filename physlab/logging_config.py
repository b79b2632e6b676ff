"""Logging configuration for physlab."""

import logging
from typing import Optional

from physlab import config


def setup_logging(
    name: str = "physlab",
    level: Optional[str] = None,
    fmt: Optional[str] = None,
    settings: Optional[config.Settings] = None,
) -> logging.Logger:
    """
    Set up a console logger for the package.

    Calling it again only updates the level and format; no second handler is
    attached.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        fmt: Record format
        settings: source of level and format when they are not given
            (default: the active configuration, see config.apply_settings)

    Returns:
        Configured logger instance
    """
    if settings is None:
        settings = config.current_settings()
    level = level or settings.log_level
    fmt = fmt or settings.log_format
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)

    handler = next((h for h in logger.handlers if getattr(h, "_physlab", False)), None)
    if handler is None:
        handler = logging.StreamHandler()
        handler._physlab = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(fmt))
    return logger
