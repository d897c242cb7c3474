"""Operator syntax for the composition algebra.

Wrapping a function in one of these Structs exposes the combinators as
Python operators. Their precedence, tightest first, follows Python's own
table, and all of them are left-associative:

    >>   forward composition          (Fn and every wrapper)
    &    effectful composition        (Logged, Maybe, Many)
    ^    single-type composition      (Endo, Sink, Mut)
    |    forward application          (value | wrapper)

So `2 | Fn(incr) >> square` composes first and then applies, giving 9.

Example:
    ```python
    from kombi.ops import Fn, Maybe

    incr = Fn(lambda x: x + 1)
    square = lambda x: x * x
    2 | incr >> square  # 9

    head = Maybe(lambda xs: xs[0] if xs else None)
    [[4, 5]] | head & head  # 4
    [] | head & head        # None
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import msgspec

from kombi.apply import pipe_mut
from kombi.compose import compose
from kombi.effects import compose_logged, compose_many, compose_optional
from kombi.errors import NotCallableError
from kombi.single import concat_effects, concat_endo, concat_mut

__all__ = ['Endo', 'Fn', 'Logged', 'Many', 'Maybe', 'Mut', 'Sink']

# Marks an operand that is a different wrapper of the same family
_SIBLING = object()


class Fn(msgspec.Struct, frozen=True):
    """Callable wrapper supporting `>>` composition and `|` application.

    Attributes:
        func: The wrapped unary function.
    """

    func: Callable[..., Any]

    # Wrappers sharing an operator; siblings in one family never combine.
    _family = None

    def __post_init__(self) -> None:
        if not callable(self.func):
            raise NotCallableError(type(self).__name__, self.func)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.func(*args, **kwargs)

    def _operand(self, other: Any) -> Any:
        """Unwrap `other`, or return `_SIBLING` for a sibling wrapper of another type."""
        if isinstance(other, Fn):
            if other._family is not None and other._family == self._family and type(other) is not type(self):
                return _SIBLING
            return other.func
        return other

    def __rshift__(self, other: Any) -> Fn:
        g = other.func if isinstance(other, Fn) else other
        return Fn(compose(self.func, g))

    def __rrshift__(self, other: Any) -> Fn:
        return Fn(compose(other, self.func))

    def __ror__(self, value: Any) -> Any:
        return self.func(value)


class Logged(Fn, frozen=True):
    """Stage returning `(value, log)`; `&` concatenates logs in call order."""

    _family = 'effect'

    def __and__(self, other: Any) -> Logged:
        g = self._operand(other)
        if g is _SIBLING:
            return NotImplemented
        return Logged(compose_logged(self.func, g))

    def __rand__(self, other: Any) -> Logged:
        f = self._operand(other)
        if f is _SIBLING:
            return NotImplemented
        return Logged(compose_logged(f, self.func))


class Maybe(Fn, frozen=True):
    """Stage returning a value or `None`; `&` stops at the first `None`."""

    _family = 'effect'

    def __and__(self, other: Any) -> Maybe:
        g = self._operand(other)
        if g is _SIBLING:
            return NotImplemented
        return Maybe(compose_optional(self.func, g))

    def __rand__(self, other: Any) -> Maybe:
        f = self._operand(other)
        if f is _SIBLING:
            return NotImplemented
        return Maybe(compose_optional(f, self.func))


class Many(Fn, frozen=True):
    """Stage returning zero or more values; `&` flattens results in order."""

    _family = 'effect'

    def __and__(self, other: Any) -> Many:
        g = self._operand(other)
        if g is _SIBLING:
            return NotImplemented
        return Many(compose_many(self.func, g))

    def __rand__(self, other: Any) -> Many:
        f = self._operand(other)
        if f is _SIBLING:
            return NotImplemented
        return Many(compose_many(f, self.func))


class Endo(Fn, frozen=True):
    """Self-map `A -> A`; `^` composes two self-maps."""

    _family = 'single'

    def __xor__(self, other: Any) -> Endo:
        g = self._operand(other)
        if g is _SIBLING:
            return NotImplemented
        return Endo(concat_endo(self.func, g))

    def __rxor__(self, other: Any) -> Endo:
        f = self._operand(other)
        if f is _SIBLING:
            return NotImplemented
        return Endo(concat_endo(f, self.func))


class Sink(Fn, frozen=True):
    """Side-effecting `A -> None`; `^` runs both sinks on the same input."""

    _family = 'single'

    def __xor__(self, other: Any) -> Sink:
        g = self._operand(other)
        if g is _SIBLING:
            return NotImplemented
        return Sink(concat_effects(self.func, g))

    def __rxor__(self, other: Any) -> Sink:
        f = self._operand(other)
        if f is _SIBLING:
            return NotImplemented
        return Sink(concat_effects(f, self.func))


class Mut(Fn, frozen=True):
    """In-place mutation of a target; `^` chains, `target | Mut` applies."""

    _family = 'single'

    def __xor__(self, other: Any) -> Mut:
        g = self._operand(other)
        if g is _SIBLING:
            return NotImplemented
        return Mut(concat_mut(self.func, g))

    def __rxor__(self, other: Any) -> Mut:
        f = self._operand(other)
        if f is _SIBLING:
            return NotImplemented
        return Mut(concat_mut(f, self.func))

    def __ror__(self, target: Any) -> None:
        pipe_mut(target, self.func)
