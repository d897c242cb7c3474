"""Arity adapters: curry, uncurry, flip and zurry.

Multi-argument functions do not fit unary composition. Currying turns
them into chains of one-argument functions; `flip` moves configuration
arguments in front of data arguments; `zurry` forces a thunk left over
from flipping a zero-argument method.

Example:
    ```python
    add = curry2(lambda a, b: a + b)
    add(1)(2)  # 3

    upper = zurry(flip_nullary(lambda s: s.upper))
    upper('kombi')  # 'KOMBI'
    ```
"""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Any

from kombi.errors import ensure_callable

__all__ = [
    'curry2',
    'curry3',
    'flip',
    'flip_nullary',
    'unbound',
    'uncurry2',
    'zurry',
]


def curry2[A, B, C](f: Callable[[A, B], C]) -> Callable[[A], Callable[[B], C]]:
    """Turn `f(a, b)` into `f(a)(b)`.

    Args:
        f: A two-argument function.

    Returns:
        A function taking `a` and returning a function that takes `b`.
    """
    ensure_callable('curry2', f)

    def take_a(a: A) -> Callable[[B], C]:
        def take_b(b: B) -> C:
            return f(a, b)

        return take_b

    return take_a


def curry3[A, B, C, Z](f: Callable[[A, B, C], Z]) -> Callable[[A], Callable[[B], Callable[[C], Z]]]:
    """Turn `f(a, b, c)` into `f(a)(b)(c)`."""
    ensure_callable('curry3', f)

    def take_a(a: A) -> Callable[[B], Callable[[C], Z]]:
        def take_b(b: B) -> Callable[[C], Z]:
            def take_c(c: C) -> Z:
                return f(a, b, c)

            return take_c

        return take_b

    return take_a


def uncurry2[A, B, C](f: Callable[[A], Callable[[B], C]]) -> Callable[[A, B], C]:
    """Turn `f(a)(b)` back into `f(a, b)`; the inverse of `curry2`."""
    ensure_callable('uncurry2', f)

    def uncurried(a: A, b: B) -> C:
        return f(a)(b)

    return uncurried


def flip[A, B, C](f: Callable[[A], Callable[[B], C]]) -> Callable[[B], Callable[[A], C]]:
    """Swap the order of a curried function's two arguments.

    Useful when the data argument comes first but you want to fix the
    configuration up front and pipe data in later. `flip(flip(f))`
    behaves like `f`.

    Example:
        ```python
        split = curry2(str.split)      # split(text)(sep)
        on_comma = flip(split)(',')    # data-last
        on_comma('a,b')
        # ['a', 'b']
        ```
    """
    ensure_callable('flip', f)

    def take_b(b: B) -> Callable[[A], C]:
        def take_a(a: A) -> C:
            return f(a)(b)

        return take_a

    return take_b


def flip_nullary[A, C](f: Callable[[A], Callable[[], C]]) -> Callable[[], Callable[[A], C]]:
    """Flip a function whose second stage takes no arguments.

    `f(a)()` becomes `flip_nullary(f)()(a)`; follow with `zurry` to drop
    the empty call.
    """
    ensure_callable('flip_nullary', f)

    def configured() -> Callable[[A], C]:
        def take_a(a: A) -> C:
            return f(a)()

        return take_a

    return configured


def zurry[A](f: Callable[[], A]) -> A:
    """Call a zero-argument function and return its value."""
    ensure_callable('zurry', f)
    return f()


def unbound(name: str, /, *args: Any, **kwargs: Any) -> Callable[[Any], Any]:
    """Free, data-last version of a method.

    `unbound('replace', 'a', 'b')` is the function `s -> s.replace('a', 'b')`,
    the same shape `zurry(flip_nullary(...))` yields for a bound method
    but for any arguments.
    """
    return operator.methodcaller(name, *args, **kwargs)
