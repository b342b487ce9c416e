from __future__ import annotations

import functools
import inspect
from typing import Any, Callable

from public import public

from fputils.common.exceptions import SignatureError

EMPTY = inspect.Parameter.empty  # marker for missing default
POSITIONAL_ONLY = inspect.Parameter.POSITIONAL_ONLY
POSITIONAL_OR_KEYWORD = inspect.Parameter.POSITIONAL_OR_KEYWORD


@public
def arity(fn: Callable) -> int:
    """Count the required positional parameters of `fn`.

    Variadic parameters, keyword-only parameters and parameters with a
    default value are not counted.

    Raises
    ------
    SignatureError
        If `fn` is not callable or its signature cannot be inspected.

    Examples
    --------
    >>> arity(lambda a, b, c=1: None)
    2
    >>> arity(lambda *args: None)
    0
    """
    if not callable(fn):
        raise SignatureError(fn, "not a callable")
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError) as e:
        raise SignatureError(fn, str(e)) from e
    return sum(
        param.kind in (POSITIONAL_ONLY, POSITIONAL_OR_KEYWORD)
        and param.default is EMPTY
        for param in sig.parameters.values()
    )


def _accumulate(fn: Callable, n: int, invoke: Callable) -> Callable:
    @functools.wraps(fn)
    def curried(*args):
        if len(args) >= n:
            return invoke(args)
        return lambda *more: curried(*args, *more)

    return curried


@public
def curry_n(n: int, fn: Callable) -> Callable:
    """Curry `fn` up to an explicit number of arguments.

    Arguments are accumulated over successive calls until at least `n` have
    been collected, then `fn` is called with the first `n` of them. Any
    arguments beyond `n` are dropped.

    Parameters
    ----------
    n
        Number of arguments to collect before calling `fn`.
    fn
        The function to curry, usually one whose arity cannot be inspected,
        such as a variadic function.

    Examples
    --------
    >>> add_args = curry_n(3, lambda *args: sum(args))
    >>> add_args(1)(2)(3)
    6
    >>> add_args(1, 2, 3, 4)
    6
    """
    return _accumulate(fn, n, lambda args: fn(*args[:n]))


@public
def curry(fn: Callable) -> Callable:
    """Curry `fn` based on its declared arity.

    The arity is computed once by `arity`. Once at least that many
    arguments have been accumulated, all of them are forwarded to `fn`.
    A function taking only ``*args`` has an arity of zero, so it is called
    on the first invocation.

    Examples
    --------
    >>> add3 = curry(lambda a, b, c: a + b + c)
    >>> add3(1)(2, 3)
    6
    >>> add3(1, 2)(3)
    6
    """
    return _accumulate(fn, arity(fn), lambda args: fn(*args))


curryN = curry_n
public(curryN=curryN)
