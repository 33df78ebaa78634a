"""Fallible fetch - awaits an upstream handle and captures its failure as a value."""

import asyncio
import inspect
from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    """Outcome of awaiting an upstream fetch."""

    success: bool
    value: T | None = None
    error: str | None = None
    error_type: str | None = None

    @classmethod
    def ok(cls, value: T) -> "FetchResult[T]":
        return cls(success=True, value=value)

    @classmethod
    def failed(cls, exc: BaseException) -> "FetchResult[T]":
        return cls(success=False, error=str(exc), error_type=type(exc).__name__)


async def try_fetch(source: Awaitable[T]) -> FetchResult[T]:
    """Await an upstream fetch once.

    Any ``Exception`` raised by the fetch becomes a failed result.
    Cancellation still propagates.

    Args:
        source: Already started fetch (task, future or coroutine)

    Returns:
        FetchResult with either the value or the error description
    """
    try:
        value = await source
    except Exception as exc:
        return FetchResult.failed(exc)
    return FetchResult.ok(value)


def discard_fetch(source: Awaitable[object] | None) -> None:
    """Release a fetch handle that will never be awaited.

    Coroutines are closed. Pending futures and tasks are cancelled, and
    the exception of a finished one is retrieved so asyncio does not
    report it as unhandled. Other awaitables are left alone.
    """
    if source is None:
        return
    if inspect.iscoroutine(source):
        source.close()
    elif isinstance(source, asyncio.Future):
        if not source.done():
            source.cancel()
        elif not source.cancelled():
            source.exception()
