"""Runtime configuration: KombiConfig and initialization."""

from __future__ import annotations

import os
from dataclasses import dataclass

from kombi.runtime._logging import configure_logging, get_logger, reset_logging

__all__ = [
    'KombiConfig',
    'get_config',
    'init',
]

_FALSY = frozenset({'0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class KombiConfig:
    """Configuration for kombi's logging.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_logs: Emit JSON records if True, console output otherwise.
    """

    log_level: str | None = None
    json_logs: bool = True


# Global configuration (set by init())
_config: KombiConfig | None = None


def _detect_log_level() -> str | None:
    """Read KOMBI_LOG_LEVEL; unset or empty means silent."""
    level = os.environ.get('KOMBI_LOG_LEVEL', '').strip()
    return level.upper() or None


def _detect_json_logs() -> bool:
    """Read KOMBI_JSON_LOGS; JSON output unless explicitly disabled."""
    return os.environ.get('KOMBI_JSON_LOGS', '').strip().lower() not in _FALSY


def init(
    log_level: str | None = None,
    json_logs: bool | None = None,
) -> KombiConfig:
    """Initialize kombi with the given configuration.

    Unset arguments fall back to the `KOMBI_LOG_LEVEL` and
    `KOMBI_JSON_LOGS` environment variables. When no level resolves,
    logging set up by an earlier call is removed and kombi is silent again.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        json_logs: JSON (True) or console (False) rendering.

    Returns:
        The KombiConfig that was set.

    Example:
        ```python
        from kombi.runtime import init

        init(log_level='DEBUG', json_logs=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level.upper() if log_level is not None else _detect_log_level()
    resolved_json = json_logs if json_logs is not None else _detect_json_logs()

    _config = KombiConfig(log_level=resolved_level, json_logs=resolved_json)

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)
        get_logger(__name__).debug('kombi.configured', log_level=resolved_level, json_logs=resolved_json)
    else:
        reset_logging()

    return _config


def get_config() -> KombiConfig:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'kombi not initialized. Call kombi.runtime.init() first.'
        raise RuntimeError(msg)
    return _config


def _reset() -> None:
    """Forget the current configuration (test helper)."""
    global _config  # noqa: PLW0603
    _config = None
