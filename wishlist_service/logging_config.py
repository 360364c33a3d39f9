"""Logging setup shared by the app factory and the dev server."""

import logging

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level="INFO"):
    """Attach a single stream handler to the ``wishlist_service`` logger."""
    logger = logging.getLogger("wishlist_service")
    logger.setLevel(level)

    # Repeated create_app() calls (tests) must not stack handlers
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
    logger.addHandler(handler)
    return logger
