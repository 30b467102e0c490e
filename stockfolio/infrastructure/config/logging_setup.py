"""Root logger configuration for the API process."""

import logging
import os
from typing import Optional, Union

LOG_LEVEL_ENV = "STOCKFOLIO_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

LOGGER = logging.getLogger(__name__)


def _coerce_level(level: Union[str, int]) -> int:
    """Translate "debug", "WARNING" or "10" into a numeric log level."""
    if isinstance(level, int):
        return level
    name = level.strip()
    if name.isdigit():
        return int(name)
    resolved = logging.getLevelName(name.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def configure_logging(level: Optional[Union[str, int]] = None, *, force: bool = False) -> int:
    """Configure the root logger for console output and return the level applied.

    The level defaults to ``STOCKFOLIO_LOG_LEVEL``. An unrecognised name falls
    back to INFO with a warning. Without ``force`` an already configured root
    logger (uvicorn's, pytest's) keeps its handlers and only has its level
    adjusted.
    """
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, "INFO")
    try:
        resolved_level = _coerce_level(level)
        unknown = False
    except ValueError:
        resolved_level = logging.INFO
        unknown = True

    root_logger = logging.getLogger()
    if root_logger.handlers and not force:
        root_logger.setLevel(resolved_level)
    else:
        logging.basicConfig(level=resolved_level, format=LOG_FORMAT, force=force)

    if unknown:
        LOGGER.warning("Unknown log level %r, using INFO", level)
    return resolved_level
