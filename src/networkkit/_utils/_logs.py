import logging
import sys

from .constants import LOGGER_NAME

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(debug: bool = False) -> logging.Logger:
    """Configure the networkkit logger.

    Attaches a single stderr handler, however often it is called, and sets
    the level to DEBUG or INFO.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    if not any(getattr(h, "_networkkit", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._networkkit = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger
