"""Logging setup for the projection engines and the API."""

import logging
from typing import Optional, Union

from projections import config

ROOT_LOGGER = "projections"

_LOGGING_CONFIGURED = False


def setup_logging(level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Attach a single stream handler to the ``projections`` logger.

    Safe to call more than once; later calls only change the level.
    """
    global _LOGGING_CONFIGURED

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level or config.LOG_LEVEL)

    if not _LOGGING_CONFIGURED:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(config.LOG_FORMAT, datefmt=config.DATE_FORMAT))
        logger.addHandler(handler)
        _LOGGING_CONFIGURED = True

    return logger
