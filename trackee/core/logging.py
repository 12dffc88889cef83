# trackee/core/logging.py
import logging

from trackee.core.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """
    Configure the ``trackee`` logger hierarchy.

    Only the package logger is touched so that embedding applications keep
    control over the root logger.
    """
    if level is None:
        level = get_settings().LOG_LEVEL

    logger = logging.getLogger("trackee")
    logger.setLevel(level.upper())

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
