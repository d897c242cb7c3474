"""Hypothesis strategies for property-based testing of kombi combinators."""

from collections.abc import Callable

from hypothesis import strategies as st

# -----------------------------------------------------------------------------
# Basic value strategies
# -----------------------------------------------------------------------------

integers = st.integers(min_value=-1000, max_value=1000)
small_ints = st.integers(min_value=-10, max_value=10)
int_lists = st.lists(integers, max_size=20)
texts = st.text(min_size=0, max_size=50)

# -----------------------------------------------------------------------------
# Function strategies
# -----------------------------------------------------------------------------


def _affine(coeffs: tuple[int, int]) -> Callable[[int], int]:
    a, b = coeffs

    def affine(x: int) -> int:
        return a * x + b

    affine.__qualname__ = f'affine({a}x+{b})'
    return affine


# Pure int -> int functions
int_functions = st.tuples(small_ints, small_ints).map(_affine)


def _partial(args: tuple[Callable[[int], int], int]) -> Callable[[int], int | None]:
    f, modulus = args

    def partial(x: int) -> int | None:
        return None if x % modulus == 0 else f(x)

    return partial


# int -> int | None functions that are absent on multiples of a modulus
optional_functions = st.tuples(int_functions, st.integers(min_value=2, max_value=5)).map(_partial)


def _fan_out(args: tuple[Callable[[int], int], int]) -> Callable[[int], list[int]]:
    f, width = args

    def fan_out(x: int) -> list[int]:
        return [f(x) + i for i in range(width)]

    return fan_out


# int -> list[int] functions producing 0 to 3 results
many_functions = st.tuples(int_functions, st.integers(min_value=0, max_value=3)).map(_fan_out)


def _logging(args: tuple[Callable[[int], int], str]) -> Callable[[int], tuple[int, list[str]]]:
    f, tag = args

    def logging_stage(x: int) -> tuple[int, list[str]]:
        return f(x), [f'{tag}:{x}']

    return logging_stage


# int -> (int, [str]) functions recording one tagged entry per call
logged_functions = st.tuples(
    int_functions,
    st.text(alphabet='abcdefghij', min_size=1, max_size=4),
).map(_logging)

# Two-argument int functions for the arity adapters
binary_functions = st.sampled_from([
    lambda a, b: a + b,
    lambda a, b: a - b,
    lambda a, b: a * b,
    lambda a, b: (a, b),
])
