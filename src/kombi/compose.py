"""Forward composition of unary functions."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from kombi.errors import ensure_callable

__all__ = ['compose', 'flow', 'identity']


def identity[T](value: T) -> T:
    """Return the argument unchanged."""
    return value


def compose[A, B, C](f: Callable[[A], B], g: Callable[[B], C]) -> Callable[[A], C]:
    """Compose two functions left to right.

    The returned function computes `g(f(a))`. Nothing runs until it is
    called.

    Args:
        f: Function applied first.
        g: Function applied to the result of `f`.

    Returns:
        A function from the input of `f` to the output of `g`.

    Example:
        ```python
        incr_then_square = compose(lambda x: x + 1, lambda x: x * x)
        incr_then_square(2)
        # 9
        list(map(compose(incr_then_square, str), [1, 2]))
        # ['4', '9']
        ```
    """
    ensure_callable('compose', f, g)

    def composed(a: A) -> C:
        return g(f(a))

    return composed


def flow(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose any number of functions left to right.

    `flow(f, g, h)` behaves like `compose(compose(f, g), h)`. `flow()` is
    `identity`.
    """
    ensure_callable('flow', *fns)
    if not fns:
        return identity

    def flowed(a: Any) -> Any:
        for fn in fns:
            a = fn(a)
        return a

    return flowed
