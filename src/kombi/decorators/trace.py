"""@traced decorator: debug-level logging around pipeline stages."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, overload

import wrapt

from kombi.errors import ensure_callable
from kombi.runtime._logging import get_logger

__all__ = ['traced']


@overload
def traced[F: Callable[..., Any]](func: F, /, *, name: str | None = None) -> F: ...
@overload
def traced[F: Callable[..., Any]](func: None = None, /, *, name: str | None = None) -> Callable[[F], F]: ...


def traced(func: Callable[..., Any] | None = None, /, *, name: str | None = None) -> Any:
    """Log each call of a stage without changing its behavior.

    Every call emits a `stage.call` debug event and, on success, a
    `stage.return` event. An exception is logged as `stage.error` and
    re-raised unchanged. Nothing is printed unless logging is configured
    at DEBUG (see `kombi.runtime.init`).

    Args:
        func: The stage to wrap. Omit to use as `@traced(name=...)`.
        name: Name reported in the log events. Defaults to the function's
            qualified name.

    Returns:
        The wrapped stage, or a decorator when `func` is omitted.

    Example:
        ```python
        @traced
        def parse(s: str) -> int:
            return int(s)

        pipeline = compose(parse, traced(lambda n: n * 2, name='double'))
        ```
    """
    if func is None:

        def decorator(f: Callable[..., Any]) -> Callable[..., Any]:
            return traced(f, name=name)

        return decorator

    ensure_callable('traced', func)
    stage = name or getattr(func, '__qualname__', None) or repr(func)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Any:
        log = get_logger('kombi.trace')
        log.debug('stage.call', stage=stage)
        try:
            result = wrapped(*args, **kwargs)
        except Exception as exc:
            log.debug('stage.error', stage=stage, error=repr(exc))
            raise
        log.debug('stage.return', stage=stage, result_type=type(result).__name__)
        return result

    return wrapper(func)
