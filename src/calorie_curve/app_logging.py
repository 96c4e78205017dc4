"""Logging setup for the service."""

import logging

LOGGER_NAME = "calorie_curve"
_FORMAT = "%(levelname)s: %(name)s: %(message)s"
_LOCAL_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO", *, local: bool = False) -> logging.Logger:
    """Attach one stream handler to the package logger and apply ``level``.

    Repeated calls only adjust the level; ``local`` adds timestamps for
    development runs.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())
    logger.propagate = False
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOCAL_FORMAT if local else _FORMAT))
        logger.addHandler(handler)
    return logger
