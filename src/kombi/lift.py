"""Point-free map, filter and reduce.

Each lifter is the builtin iteration primitive curried so the function
comes first and the collection last, ready for `compose` and `pipe`.
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterable
from typing import Any

from kombi.arity import curry2, curry3
from kombi.errors import ensure_callable

__all__ = ['filter_by', 'map_over', 'reduce_with']


def _map_list(f: Callable[[Any], Any], xs: Iterable[Any]) -> list[Any]:
    return list(map(f, xs))


def _filter_list(p: Callable[[Any], bool], xs: Iterable[Any]) -> list[Any]:
    return list(filter(p, xs))


def _fold(acc: Callable[[Any, Any], Any], initial: Any, xs: Iterable[Any]) -> Any:
    return functools.reduce(acc, xs, initial)


_curried_map = curry2(_map_list)
_curried_filter = curry2(_filter_list)
_curried_fold = curry3(_fold)


def map_over[A, B](f: Callable[[A], B]) -> Callable[[Iterable[A]], list[B]]:
    """Lift `f` to a function over collections.

    Example:
        ```python
        map_over(lambda x: x + 1)([1, 2, 3])
        # [2, 3, 4]
        ```
    """
    ensure_callable('map_over', f)
    return _curried_map(f)


def filter_by[A](p: Callable[[A], bool]) -> Callable[[Iterable[A]], list[A]]:
    """Lift predicate `p` to a function keeping matching elements in order."""
    ensure_callable('filter_by', p)
    return _curried_filter(p)


def reduce_with[R, A](accumulate: Callable[[R, A], R]) -> Callable[[R], Callable[[Iterable[A]], R]]:
    """Curried left fold: `reduce_with(acc)(initial)(xs)`.

    Folds from left to right starting at `initial`; an empty collection
    returns `initial` unchanged.

    Example:
        ```python
        total = reduce_with(lambda acc, x: acc + x)(0)
        total([1, 2, 3])
        # 6
        ```
    """
    ensure_callable('reduce_with', accumulate)
    return _curried_fold(accumulate)
