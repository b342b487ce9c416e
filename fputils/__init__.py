"""Initialize fputils module."""
from __future__ import annotations

__version__ = "0.1.0"

from fputils import util
from fputils.common.caching import memoize, serialize_args
from fputils.common.composition import compose, pipe
from fputils.common.currying import arity, curry, curry_n, curryN
from fputils.common.exceptions import FPError
from fputils.config import option_context, options

__all__ = [
    "util",
    "FPError",
    "arity",
    "compose",
    "curry",
    "curryN",
    "curry_n",
    "memoize",
    "option_context",
    "options",
    "pipe",
    "serialize_args",
]
