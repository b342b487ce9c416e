"""Function composition in both directions."""

from __future__ import annotations

from typing import Any, Callable

import toolz
from public import public


def _unary(fold: Callable, fns: tuple[Callable, ...]) -> Callable[[Any], Any]:
    # toolz does not check for callables, so bad entries only fail when reached
    folded = fold(*fns)

    def chained(x):
        return folded(x)

    return chained


@public
def compose(*fns: Callable) -> Callable[[Any], Any]:
    """Compose unary functions, applying the rightmost one first.

    Parameters
    ----------
    fns
        Unary callables. With no callables the result is the identity.

    Returns
    -------
    Callable
        A function of a single argument evaluating ``f1(f2(...fn(x)))``.

    Examples
    --------
    >>> add2_then_times3 = compose(lambda x: x * 3, lambda x: x + 2)
    >>> add2_then_times3(2)
    12
    >>> compose()("unchanged")
    'unchanged'
    """
    return _unary(toolz.compose, fns)


@public
def pipe(*fns: Callable) -> Callable[[Any], Any]:
    """Chain unary functions left to right, applying the leftmost one first.

    Examples
    --------
    >>> times3_then_add2 = pipe(lambda x: x * 3, lambda x: x + 2)
    >>> times3_then_add2(2)
    8
    """
    return _unary(toolz.compose_left, fns)
