"""Timing helpers for thumbnail rendering."""

import inspect
import time
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import ParamSpec, TypeVar, cast, overload

from loguru import logger

P = ParamSpec("P")
R = TypeVar("R")


def _log_elapsed(label: str, level: str, start_time: float) -> None:
    elapsed_time = time.perf_counter() - start_time
    logger.log(level, f"[PROFILE] {label} took {elapsed_time:.3f}s")


@overload
def timed(func: Callable[P, R]) -> Callable[P, R]: ...


@overload
def timed(
    *, label: str | None = None, level: str = "INFO"
) -> Callable[[Callable[P, R]], Callable[P, R]]: ...


def timed(
    func: Callable[P, R] | None = None,
    *,
    label: str | None = None,
    level: str = "INFO",
) -> Callable[P, R] | Callable[[Callable[P, R]], Callable[P, R]]:
    """Decorator logging how long each call took.

    Works on plain and coroutine functions, with or without arguments. The
    time is logged even when the call raises.

    Usage:
        @timed
        def render_thumbnail(source, size): ...

        @timed(label="gallery", level="DEBUG")
        async def render_many(handles): ...
    """

    def decorate(fn: Callable[P, R]) -> Callable[P, R]:
        name = label or fn.__qualname__

        if inspect.iscoroutinefunction(fn):
            coro_fn = cast(Callable[P, Awaitable[object]], fn)

            @wraps(fn)
            async def async_wrapper(*args: P.args, **kwargs: P.kwargs) -> object:
                start_time = time.perf_counter()
                try:
                    return await coro_fn(*args, **kwargs)
                finally:
                    _log_elapsed(name, level, start_time)

            return cast(Callable[P, R], async_wrapper)

        @wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            start_time = time.perf_counter()
            try:
                return fn(*args, **kwargs)
            finally:
                _log_elapsed(name, level, start_time)

        return wrapper

    if func is not None:
        return decorate(func)
    return decorate
