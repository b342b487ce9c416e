from __future__ import annotations

import contextlib
from typing import Any, Callable, Optional

from koerce import Annotable, MatchError
from public import public

# raised when an option is assigned a value of the wrong type
ValidationError = (MatchError, ValueError, TypeError)


class Config(Annotable):
    def get(self, key: str) -> Any:
        value = self
        for field in key.split("."):
            value = getattr(value, field)
        return value

    def set(self, key: str, value: Any) -> None:
        *prefix, key = key.split(".")
        conf = self
        for field in prefix:
            conf = getattr(conf, field)
        setattr(conf, key, value)

    @contextlib.contextmanager
    def _with_temporary(self, options):
        try:
            old = {}
            for key, value in options.items():
                old[key] = self.get(key)
                self.set(key, value)
            yield
        finally:
            for key, value in old.items():
                self.set(key, value)

    def __call__(self, options):
        return self._with_temporary(options)


class Memoize(Config):
    """Options controlling how `memoize` turns arguments into cache keys.

    Attributes
    ----------
    strict : bool
        Raise `KeySerializationError` for argument types outside the
        supported set. If `False`, such values are keyed by their type name
        and `repr`.
    """

    strict: bool = True


class Options(Config):
    """fputils configuration options.

    Attributes
    ----------
    verbose : bool
        Run in verbose mode if [](`True`)
    verbose_log: Callable[[str], None] | None
        A callable to use when logging.
    memoize : Memoize
        Options controlling cache key derivation.
    """

    verbose: bool = False
    verbose_log: Optional[Callable] = None
    memoize: Memoize = Memoize()


options = Options()


@public
def option_context(key, new_value):
    return options({key: new_value})


public(options=options)
