"""Error types raised while building combinators.

Failures raised by caller-supplied functions are never caught or wrapped;
these types only cover misuse detected when a combinator is constructed
or when a stage returns the wrong shape.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    'KombiError',
    'LogShapeError',
    'NotCallableError',
    'ensure_callable',
]


class KombiError(Exception):
    """Base class for errors raised by kombi itself."""


class NotCallableError(KombiError, TypeError):
    """Raised when a combinator receives an argument that is not callable."""

    def __init__(self, combinator: str, value: Any) -> None:
        self.combinator = combinator
        self.value = value
        super().__init__(
            f"{combinator}() expected a callable, got '{type(value).__name__}'"
        )


class LogShapeError(KombiError, TypeError):
    """Raised when a logged stage does not return a (value, log) pair."""

    def __init__(self, stage: Any, result: Any) -> None:
        self.stage = stage
        self.result = result
        name = getattr(stage, '__name__', repr(stage))
        if isinstance(result, tuple | list) and len(result) == 2:
            got = f"a log of type '{type(result[1]).__name__}'"
        else:
            got = f"'{type(result).__name__}'"
        super().__init__(
            f"logged stage '{name}' must return a (value, log) pair with a sequence of strings as log, got {got}"
        )


def ensure_callable(combinator: str, *fns: Any) -> None:
    """Raise NotCallableError for the first argument that is not callable."""
    for f in fns:
        if not callable(f):
            raise NotCallableError(combinator, f)
