"""Effectful ("fish") composition for three result shapes.

Each variant chains two unary functions whose results carry an effect and
follows that effect's own sequencing rule:

- logged: `A -> (B, log)` stages, logs concatenated in call order
- optional: `A -> B | None` stages, `None` short-circuits
- many: `A -> Iterable[B]` stages, results flattened in order

The three are independent functions, not instances of a shared effect
interface.

Example:
    ```python
    parse = lambda s: int(s) if s.isdigit() else None
    half = lambda n: n // 2 if n % 2 == 0 else None
    compose_optional(parse, half)('10')  # 5
    compose_optional(parse, half)('x')   # None, half never runs
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any

from kombi.errors import LogShapeError, ensure_callable

__all__ = [
    'compose_logged',
    'compose_many',
    'compose_optional',
    'first',
    'logged',
    'logged_unit',
    'many_unit',
    'second',
    'tell',
]

type LoggedResult[T] = tuple[T, Sequence[str]]


# ---------------------------------------------------------------------
# Log accumulation
# ---------------------------------------------------------------------


def _unpack_logged(stage: Callable[..., Any], result: Any) -> tuple[Any, Sequence[str]]:
    if not isinstance(result, tuple | list) or len(result) != 2:
        raise LogShapeError(stage, result)
    value, log = result
    # str is a Sequence but not a log
    if not isinstance(log, Sequence) or isinstance(log, str | bytes):
        raise LogShapeError(stage, result)
    return value, log


def compose_logged[A, B, C](
    f: Callable[[A], LoggedResult[B]],
    g: Callable[[B], LoggedResult[C]],
) -> Callable[[A], tuple[C, list[str]]]:
    """Compose two logging functions, concatenating their logs.

    The composite runs `f(a)` to get `(b, log1)`, then `g(b)` to get
    `(c, log2)`, and returns `(c, [*log1, *log2])`. It never
    short-circuits.

    Args:
        f: First stage, returning a value and its log entries.
        g: Second stage, fed the value produced by `f`.

    Returns:
        A function returning the final value and the combined log.

    Raises:
        LogShapeError: When called, if a stage does not return a pair
            whose log is a non-string sequence.

    Example:
        ```python
        incr = lambda x: (x + 1, [f'incr {x}'])
        square = lambda x: (x * x, [f'square {x}'])
        compose_logged(incr, square)(2)
        # (9, ['incr 2', 'square 3'])
        ```
    """
    ensure_callable('compose_logged', f, g)

    def composed(a: A) -> tuple[C, list[str]]:
        b, log = _unpack_logged(f, f(a))
        c, more_log = _unpack_logged(g, g(b))
        return c, [*log, *more_log]

    return composed


def logged_unit[T](value: T) -> tuple[T, list[str]]:
    """Identity for logged composition: the value with an empty log."""
    return value, []


def tell[T](message: str) -> Callable[[T], tuple[T, list[str]]]:
    """Build a logged stage that passes its input through and records `message`."""

    def told(value: T) -> tuple[T, list[str]]:
        return value, [message]

    return told


def logged[A, B](f: Callable[[A], B], message: str | Callable[[A, B], str]) -> Callable[[A], tuple[B, list[str]]]:
    """Lift a plain function into a logged stage.

    Args:
        f: The function to lift.
        message: A fixed log entry, or a callable building one from the
            input and output of `f`.

    Example:
        ```python
        stage = logged(str.upper, lambda a, b: f'{a} -> {b}')
        stage('hi')
        # ('HI', ['hi -> HI'])
        ```
    """
    ensure_callable('logged', f)

    def lifted(a: A) -> tuple[B, list[str]]:
        b = f(a)
        entry = message(a, b) if callable(message) else message
        return b, [entry]

    return lifted


def first[A, B, C](f: Callable[[A], C]) -> Callable[[tuple[A, B]], tuple[C, B]]:
    """Apply `f` to the first item of a pair, keeping the second."""
    ensure_callable('first', f)

    def on_first(pair: tuple[A, B]) -> tuple[C, B]:
        return f(pair[0]), pair[1]

    return on_first


def second[A, B, C](f: Callable[[B], C]) -> Callable[[tuple[A, B]], tuple[A, C]]:
    """Apply `f` to the second item of a pair, keeping the first."""
    ensure_callable('second', f)

    def on_second(pair: tuple[A, B]) -> tuple[A, C]:
        return pair[0], f(pair[1])

    return on_second


# ---------------------------------------------------------------------
# Optional presence
# ---------------------------------------------------------------------


def compose_optional[A, B, C](
    f: Callable[[A], B | None],
    g: Callable[[B], C | None],
) -> Callable[[A], C | None]:
    """Compose two functions that may return `None`.

    If `f(a)` is `None` the composite returns `None` and `g` is never
    called. Otherwise it returns `g(b)`, which may itself be `None`.

    Example:
        ```python
        head = lambda xs: xs[0] if xs else None
        compose_optional(head, head)([[1, 2], [3]])
        # 1
        compose_optional(head, head)([])
        # None
        ```
    """
    ensure_callable('compose_optional', f, g)

    def composed(a: A) -> C | None:
        b = f(a)
        if b is None:
            return None
        return g(b)

    return composed


# ---------------------------------------------------------------------
# Multiplicity
# ---------------------------------------------------------------------


def compose_many[A, B, C](
    f: Callable[[A], Iterable[B]],
    g: Callable[[B], Iterable[C]],
) -> Callable[[A], list[C]]:
    """Compose two functions that each produce zero or more results.

    `g` runs on every value `f` produces, in order, and all of its
    results are appended: the image of the first value fully precedes
    the image of the second. An empty intermediate result yields `[]`.

    Example:
        ```python
        f = lambda x: [x, x + 1]
        g = lambda y: [y * 10, y * 10 + 1]
        compose_many(f, g)(1)
        # [10, 11, 20, 21]
        ```
    """
    ensure_callable('compose_many', f, g)

    def composed(a: A) -> list[C]:
        out: list[C] = []
        for b in f(a):
            out.extend(g(b))
        return out

    return composed


def many_unit[T](value: T) -> list[T]:
    """Identity for multi-valued composition: a one-element list."""
    return [value]
