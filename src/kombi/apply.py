"""Forward application: pipe a value into functions."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, overload

from kombi.errors import ensure_callable

__all__ = ['pipe', 'pipe_mut']

T = TypeVar('T')
T1 = TypeVar('T1')
T2 = TypeVar('T2')
T3 = TypeVar('T3')
T4 = TypeVar('T4')
T5 = TypeVar('T5')


# Overloads for type inference (up to 5 functions)
@overload
def pipe[T](value: T, /) -> T: ...
@overload
def pipe(value: T, fn1: Callable[[T], T1], /) -> T1: ...
@overload
def pipe(value: T, fn1: Callable[[T], T1], fn2: Callable[[T1], T2], /) -> T2: ...
@overload
def pipe(
    value: T, fn1: Callable[[T], T1], fn2: Callable[[T1], T2], fn3: Callable[[T2], T3], /
) -> T3: ...
@overload
def pipe(
    value: T,
    fn1: Callable[[T], T1],
    fn2: Callable[[T1], T2],
    fn3: Callable[[T2], T3],
    fn4: Callable[[T3], T4],
    /,
) -> T4: ...
@overload
def pipe(
    value: T,
    fn1: Callable[[T], T1],
    fn2: Callable[[T1], T2],
    fn3: Callable[[T2], T3],
    fn4: Callable[[T3], T4],
    fn5: Callable[[T4], T5],
    /,
) -> T5: ...


def pipe(value: Any, /, *fns: Callable[..., Any]) -> Any:
    """Apply a value to functions from left to right.

    `pipe(a, f)` is `f(a)`; `pipe(a, f, g)` is `g(f(a))`. With no functions
    the value is returned unchanged. Exceptions raised by any function
    propagate to the caller untouched.

    Args:
        value: The initial value.
        *fns: Unary functions applied in order.

    Returns:
        The result of the last function.

    Example:
        ```python
        pipe(4, lambda x: x + 1)
        # 5
        pipe(4, lambda x: x + 1, lambda x: x * x, str)
        # '25'
        ```
    """
    ensure_callable('pipe', *fns)
    current = value
    for fn in fns:
        current = fn(current)
    return current


def pipe_mut[T](target: T, f: Callable[[T], None], /) -> None:
    """Give `f` in-place access to `target`.

    `f` mutates `target` and returns nothing. Immutable values can be
    boxed in a `Ref` first. `f` must not keep a reference to `target` once
    it returns, and no other thread may touch `target` during the call.

    Example:
        ```python
        items = [3, 1, 2]
        pipe_mut(items, list.sort)
        items
        # [1, 2, 3]
        ```
    """
    ensure_callable('pipe_mut', f)
    f(target)
