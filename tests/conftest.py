"""Pytest configuration and shared fixtures for kombi tests."""

from collections.abc import Callable
from typing import Any

import pytest


class CallCounter:
    """Unary stub that records every argument it is called with."""

    def __init__(self, f: Callable[[Any], Any] = lambda x: x) -> None:
        self.f = f
        self.calls: list[Any] = []

    @property
    def count(self) -> int:
        return len(self.calls)

    def __call__(self, value: Any) -> Any:
        self.calls.append(value)
        return self.f(value)


@pytest.fixture
def counter() -> type[CallCounter]:
    """Factory for call-counting stubs."""
    return CallCounter


@pytest.fixture
def incr() -> Callable[[int], int]:
    """Add one."""
    return lambda x: x + 1


@pytest.fixture
def square() -> Callable[[int], int]:
    """Multiply a number by itself."""
    return lambda x: x * x
