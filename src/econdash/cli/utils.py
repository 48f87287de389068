"""CLI helpers."""

import asyncio
import functools
from collections.abc import Callable, Coroutine
from typing import Any, TypeVar

from econdash.infrastructure.containers import close_container

T = TypeVar("T")


def async_command(func: Callable[..., Coroutine[Any, Any, T]]) -> Callable[..., T]:
    """Run an async typer command in a fresh event loop.

    The container's HTTP client is closed before the loop shuts down, also when
    the command exits early.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        async def run() -> T:
            try:
                return await func(*args, **kwargs)
            finally:
                await close_container()

        return asyncio.run(run())

    return wrapper
