from __future__ import annotations

import functools
import json
import math
import types
from typing import Any, Callable

from public import public

from fputils import util
from fputils.common.exceptions import KeySerializationError
from fputils.config import options

logger = util.get_logger(__name__)

# larger ints are hex encoded, their decimal form may exceed the
# interpreter's int to str conversion limit
MAX_DECIMAL_INT_BITS = 1024


def _exact(value: Any, base: type, encoded: Any) -> Any:
    # subclasses (enums, namedtuples, ...) keep their own identity in the key
    if type(value) is base:
        return encoded
    return {"__instance__": [util.qualified_name(value), encoded]}


@functools.singledispatch
def normalize(value: Any, strict: bool = True) -> Any:
    """Convert `value` into a JSON encodable structure.

    Every container except lists is wrapped in a single-key dict naming its
    type, so that tuples, sets and dicts never collide with each other or
    with plain JSON values. Instances of subclasses of the supported types
    are additionally wrapped with their qualified type name.
    """
    if strict:
        raise KeySerializationError(value)
    return {"__repr__": [util.qualified_name(value), repr(value)]}


@normalize.register(type(None))
@normalize.register(bool)
def _(value, strict=True):
    return value


@normalize.register(str)
def _(value, strict=True):
    return _exact(value, str, str.__str__(value))


@normalize.register(int)
def _(value, strict=True):
    number = int.__index__(value)
    if number.bit_length() > MAX_DECIMAL_INT_BITS:
        encoded = {"__int__": hex(number)}
    else:
        encoded = number
    return _exact(value, int, encoded)


@normalize.register(float)
def _(value, strict=True):
    number = float.__float__(value)
    # nan and infinities are not valid JSON
    encoded = number if math.isfinite(number) else {"__float__": repr(number)}
    return _exact(value, float, encoded)


@normalize.register(bytes)
def _(value, strict=True):
    return _exact(value, bytes, {"__bytes__": value.hex()})


@normalize.register(list)
def _(value, strict=True):
    return _exact(value, list, [normalize(item, strict) for item in value])


@normalize.register(tuple)
def _(value, strict=True):
    encoded = {"__tuple__": [normalize(item, strict) for item in value]}
    return _exact(value, tuple, encoded)


@normalize.register(set)
@normalize.register(frozenset)
def _(value, strict=True):
    items = sorted(
        (normalize(item, strict) for item in value),
        key=functools.partial(json.dumps, sort_keys=True),
    )
    encoded = {"__set__": items}
    return encoded if type(value) in (set, frozenset) else _exact(value, set, encoded)


@normalize.register(dict)
def _(value, strict=True):
    if all(isinstance(key, str) for key in value):
        fields = {key: normalize(item, strict) for key, item in value.items()}
        return _exact(value, dict, {"__dict__": fields})
    elif strict:
        raise KeySerializationError(value)
    else:
        items = [[normalize(k, strict), normalize(v, strict)] for k, v in value.items()]
        return _exact(value, dict, {"__items__": items})


@public
def serialize_args(args: tuple) -> str:
    """Serialize a positional argument list into a stable string key.

    Structurally equal argument lists produce identical keys, and the keys of
    lists that differ in any value, order or container type are distinct.

    Parameters
    ----------
    args
        The positional arguments of a call.

    Returns
    -------
    str
        A compact JSON document.

    Raises
    ------
    KeySerializationError
        If an argument has an unsupported type and
        ``options.memoize.strict`` is enabled.

    Examples
    --------
    >>> serialize_args((1, "a", [2.5, None]))
    '[1,"a",[2.5,null]]'
    >>> serialize_args(((1, 2),))
    '[{"__tuple__":[1,2]}]'
    """
    strict = options.memoize.strict
    return json.dumps(
        [normalize(arg, strict) for arg in args],
        sort_keys=True,
        separators=(",", ":"),
    )


@public
def memoize(func: Callable) -> Callable:
    """Memoize a function.

    Results are cached by their serialized positional arguments in a cache
    owned by the returned wrapper. Entries are never evicted. Falsy results
    are cached like any other value, while calls that raise are not cached.
    The cache can be inspected through the read-only ``cache`` attribute of
    the wrapper.

    Examples
    --------
    >>> calls = []
    >>> @memoize
    ... def add(a, b):
    ...     calls.append((a, b))
    ...     return a + b
    >>> add(1, 2), add(1, 2)
    (3, 3)
    >>> calls
    [(1, 2)]
    """
    cache: dict[str, Any] = {}
    name = getattr(func, "__qualname__", repr(func))

    @functools.wraps(func)
    def wrapper(*args):
        key = serialize_args(args)
        if key in cache:
            logger.debug("cache hit for %s with %s", name, key)
            return cache[key]

        logger.debug("cache miss for %s with %s", name, key)
        util.log("memoize: computing %s for %s", name, key)
        result = func(*args)
        cache[key] = result
        return result

    wrapper.cache = types.MappingProxyType(cache)
    return wrapper
