"""Structured logging for kombi.

kombi's loggers are structlog wrappers around stdlib loggers in the
`kombi` namespace. Until `configure_logging` attaches a handler, stdlib's
defaults keep them silent: debug events from traced stages are dropped
before rendering and nothing reaches stdout or stderr.

`configure_logging` only touches the `kombi` logger, never the root
logger or structlog's global configuration, so an application's own
logging setup is left alone.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

__all__ = [
    'LOGGER_NAME',
    'configure_logging',
    'get_logger',
    'reset_logging',
]

LOGGER_NAME = 'kombi'

# Handler installed by configure_logging, if any
_handler: logging.Handler | None = None


def _qualify(name: str | None) -> str:
    """Place `name` under the kombi logger namespace."""
    if not name or name == LOGGER_NAME:
        return LOGGER_NAME
    if name.startswith(f'{LOGGER_NAME}.'):
        return name
    return f'{LOGGER_NAME}.{name}'


def _event_processors() -> list[Any]:
    """Processors that enrich a kombi event before stdlib formatting."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
    ]


def _renderer(json_output: bool) -> Any:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def get_logger(name: str | None = None) -> Any:
    """Get a stdlib-backed structlog logger in the kombi namespace.

    Level filtering happens first, so disabled events cost one
    `isEnabledFor` check and are never rendered.

    Args:
        name: Logger name, nested under `kombi` unless it already is.

    Returns:
        A structlog `BoundLogger` proxy.

    Example:
        ```python
        get_logger('trace').debug('stage.call', stage='parse')
        # logged by 'kombi.trace'
        ```
    """
    return structlog.wrap_logger(
        logging.getLogger(_qualify(name)),
        processors=[
            structlog.stdlib.filter_by_level,
            *_event_processors(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
) -> None:
    """Send kombi's events to stderr at `level` and above.

    Replaces any handler a previous call installed. While configured, the
    `kombi` logger does not propagate, so events are rendered once.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
            Traced stages log at DEBUG.
        json_output: If True, emit JSON logs. If False, use console output.
    """
    global _handler  # noqa: PLW0603

    reset_logging()

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_event_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(json_output),
        ],
    )
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(formatter)

    logger = logging.getLogger(LOGGER_NAME)
    logger.addHandler(_handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False


def reset_logging() -> None:
    """Undo `configure_logging`, returning kombi to silent defaults."""
    global _handler  # noqa: PLW0603

    logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        logger.removeHandler(_handler)
        _handler.close()
        _handler = None
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
