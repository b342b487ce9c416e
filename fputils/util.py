"""fputils utility functions."""
from __future__ import annotations

import logging
import os


def log(msg: str, *args) -> None:
    """Log `msg` using ``options.verbose_log`` if set, otherwise ``print``.

    `args` are interpolated into `msg` with ``%`` only when verbose.
    """
    from fputils.config import options

    if options.verbose:
        (options.verbose_log or print)(msg % args if args else msg)


def get_logger(
    name: str,
    level: str | None = None,
    format: str | None = None,
    propagate: bool = False,
) -> logging.Logger:
    """Get a logger.

    Repeated calls with the same `name` return the same logger without
    stacking additional handlers on it.

    Parameters
    ----------
    name
        Logger name
    level
        Logging level
    format
        Format string
    propagate
        Propagate the logger

    Returns
    -------
    logging.Logger
    """
    logger = logging.getLogger(name)
    logger.propagate = propagate
    logger.setLevel(
        level or getattr(logging, os.environ.get("LOGLEVEL", "WARNING").upper())
    )
    if logger.handlers:
        return logger

    if format is None:
        format = "%(relativeCreated)6d %(name)-20s %(levelname)-8s %(message)s"
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=format))
    logger.addHandler(handler)
    return logger


def qualified_name(obj) -> str:
    """Return the dotted ``module.qualname`` of `obj`'s type.

    Examples
    --------
    >>> qualified_name(1)
    'builtins.int'
    >>> qualified_name(object())
    'builtins.object'
    """
    typ = type(obj)
    return f"{typ.__module__}.{typ.__qualname__}"
