"""Logging configuration helpers."""

import logging

LOGGER_NAME = "babyfeed"
LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def resolve_level(level: int | str) -> int:
    """Turn a level name such as ``"debug"`` into its number.

    Unknown names resolve to INFO.
    """
    if isinstance(level, int):
        return level
    return logging.getLevelNamesMapping().get(level.strip().upper(), logging.INFO)


def configure_logging(level: int | str = logging.INFO) -> None:
    """Attach one stream handler to the ``babyfeed`` logger.

    Repeated calls only update the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolve_level(level))
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
