"""Console logging setup for the mdpage logger tree"""

import logging
import sys


LOGGER_NAME = "mdpage"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _resolve_log_level(raw_level: str) -> int:
    normalized = raw_level.strip().upper()
    level = logging.getLevelName(normalized)
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Attach a single stderr handler to the mdpage logger; safe to call repeatedly."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(_resolve_log_level(level))
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
