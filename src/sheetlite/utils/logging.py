"""Logging helpers for sheetlite.

Every module logs through a standard library logger named after the module,
so all records live under the ``sheetlite`` logger hierarchy.

Usage:
    from sheetlite.utils.logging import configure_logging, get_logger

    logger = get_logger(__name__)
    configure_logging("DEBUG")
"""

import logging

ROOT_LOGGER_NAME = "sheetlite"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler: logging.Handler | None = None


def get_logger(name: str) -> logging.Logger:
    """Get a logger inside the sheetlite hierarchy.

    Args:
        name: Logger name (typically ``__name__`` of the calling module).

    Returns:
        The standard ``logging.Logger`` for that name.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Attach a stream handler to the sheetlite logger and set its level.

    Calling it again only updates the level; the handler is installed once.

    Args:
        level: Level name ("DEBUG") or number (``logging.DEBUG``).

    Returns:
        The configured ``sheetlite`` logger.
    """
    global _handler

    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level!r}")
        level = resolved

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(_handler)
    logger.setLevel(level)
    return logger
