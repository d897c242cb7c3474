"""Single-type ("diamond") composition.

These combinators only join functions over one type `A`. They are kept
apart from `compose` to make the narrower intent visible at call sites.
"""

from __future__ import annotations

from collections.abc import Callable

from kombi.compose import compose
from kombi.errors import ensure_callable

__all__ = ['concat_effects', 'concat_endo', 'concat_mut']


def concat_effects[A](f: Callable[[A], None], g: Callable[[A], None]) -> Callable[[A], None]:
    """Run two side-effecting functions on the same input, `f` first.

    No value is threaded between them: both see the original argument.

    Example:
        ```python
        seen = []
        both = concat_effects(seen.append, lambda x: seen.append(x * 2))
        both(3)
        seen
        # [3, 6]
        ```
    """
    ensure_callable('concat_effects', f, g)

    def sequenced(a: A) -> None:
        f(a)
        g(a)

    return sequenced


def concat_endo[A](f: Callable[[A], A], g: Callable[[A], A]) -> Callable[[A], A]:
    """Compose two self-maps of `A`; behaves exactly like `compose(f, g)`."""
    ensure_callable('concat_endo', f, g)
    return compose(f, g)


def concat_mut[A](f: Callable[[A], None], g: Callable[[A], None]) -> Callable[[A], None]:
    """Chain two in-place mutations of one target.

    `f` gets exclusive access first, then `g` sees the already mutated
    target. Neither may keep the target after returning.

    Example:
        ```python
        cell = Ref(2)
        bump_then_double = concat_mut(
            lambda r: r.update(lambda n: n + 1),
            lambda r: r.update(lambda n: n * 2),
        )
        pipe_mut(cell, bump_then_double)
        cell.value
        # 6
        ```
    """
    ensure_callable('concat_mut', f, g)

    def mutated(target: A) -> None:
        f(target)
        g(target)

    return mutated
