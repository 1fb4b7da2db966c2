"""Logging configuration helpers."""

import logging

GALLERY_LOGGER = "progress_gallery"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Route gallery logs to one stream handler at the configured level.

    Safe to call repeatedly: the level is updated on every call but the handler
    is only installed once.
    """
    logger = logging.getLogger(GALLERY_LOGGER)
    logger.setLevel(level.upper())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s: %(name)s: %(message)s")
        )
        logger.addHandler(handler)
        logger.propagate = False
    return logger
