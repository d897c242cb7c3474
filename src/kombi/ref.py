"""Mutable box used as an in-place (inout) argument."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

import msgspec

__all__ = ['Ref']

T = TypeVar('T')


class Ref(msgspec.Struct, Generic[T]):
    """Single-slot mutable cell.

    Lets functions that update an immutable value in place take part in
    `pipe_mut` and `concat_mut`: the function receives the Ref and
    rebinds `value`.

    Attributes:
        value: The current contents.

    Example:
        ```python
        counter = Ref(0)
        pipe_mut(counter, lambda r: r.update(lambda n: n + 1))
        counter.value
        # 1
        ```
    """

    value: T

    def update(self, f: Callable[[T], T]) -> None:
        """Replace the contents with `f(value)`."""
        self.value = f(self.value)

    def get(self) -> T:
        """Return the current contents."""
        return self.value
