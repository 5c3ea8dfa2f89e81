# academia/utils/logger.py
import logging
import sys

logger = logging.getLogger("academia")


def configure_logging(level="WARNING", stream=None):
    """Attach the console handler once and set the level."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger.setLevel(level)

    # Prevent duplicate handlers if configured more than once
    if not logger.handlers:
        stream_handler = logging.StreamHandler(stream or sys.stderr)
        stream_formatter = logging.Formatter("[%(levelname)s] %(message)s")
        stream_handler.setFormatter(stream_formatter)
        logger.addHandler(stream_handler)

    return logger
