"""Logging configuration."""

import logging
import os

LOG_LEVEL_ENV = "BRICKSTONE_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str | int = logging.INFO) -> None:
    """Configure root logging once."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("brickstone").setLevel(level)


def setup_logging_from_env() -> None:
    """Configure logging from BRICKSTONE_LOG_LEVEL (default INFO)."""
    setup_logging(os.environ.get(LOG_LEVEL_ENV, "INFO"))
