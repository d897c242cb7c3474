"""Fixtures isolating global logging and configuration state."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from kombi.runtime import reset_logging
from kombi.runtime._config import _reset


@pytest.fixture(autouse=True)
def isolated_runtime() -> Iterator[None]:
    """Reset config and kombi logging around each test."""
    reset_logging()
    _reset()
    yield
    reset_logging()
    _reset()
