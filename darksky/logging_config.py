import logging
from typing import Optional

from darksky.config import settings


def setup_logging(log_level: Optional[str] = None) -> logging.Logger:
    """Attach a console handler to the library logger. Safe to call twice."""
    logger = logging.getLogger("darksky")
    logger.setLevel((log_level or settings.log_level).upper())

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)

    # httpx logs every request line at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    return logger
