"""Logging configuration for applications embedding the transforms.

Library modules only create loggers; nothing is attached until
:func:`get_logger` is called.
"""

from __future__ import annotations

import logging

LOGGER_NAME = "mri_coordinates"


def get_logger(debug: bool = False) -> logging.Logger:
    """Return the package logger with a single console handler attached.

    Intended for applications embedding the transforms; the library itself
    never calls it and only emits records through module loggers.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    for h in list(logger.handlers):
        logger.removeHandler(h)

    fmt = logging.Formatter("[%(asctime)s] %(levelname)s %(message)s", "%H:%M:%S")
    ch = logging.StreamHandler()
    ch.setLevel(logging.DEBUG if debug else logging.INFO)
    ch.setFormatter(fmt)
    logger.addHandler(ch)
    return logger


__all__ = ["LOGGER_NAME", "get_logger"]
