"""Last event resolver - lazily names the most recent event of the detailed history."""

import asyncio
from collections.abc import Awaitable, Sequence
from enum import Enum

from core.domain.entities.orchestration_status import (
    FUNCTION_NAME_KEY,
    NAME_KEY,
    HistoryEvent,
    OrchestrationStatus,
)
from core.infrastructure.logging import get_logger

from .fetch import discard_fetch, try_fetch

DetailsSource = Awaitable[OrchestrationStatus]


class LastEventState(str, Enum):
    """State of the memoized last event value."""

    UNRESOLVED = "unresolved"
    RESOLVED = "resolved"
    FAILED = "failed"


class LastEventResolver:
    """Memoization cell for the last event name.

    The detailed history fetch is awaited at most once, on first
    ``resolve()``. Concurrent first readers wait on the same lock and
    share the result. A failed fetch resolves to an empty string.
    """

    def __init__(self, details: DetailsSource | None, instance_id: str | None = None) -> None:
        self._details = details
        self._instance_id = instance_id
        self._value = ""
        self._state = LastEventState.UNRESOLVED if details is not None else LastEventState.RESOLVED
        self._lock = asyncio.Lock()
        self._logger = get_logger("orchestration.last_event")

    @property
    def state(self) -> LastEventState:
        return self._state

    async def resolve(self) -> str:
        """Return the last event name, fetching the detailed history on first call."""
        if self._state is not LastEventState.UNRESOLVED:
            return self._value

        async with self._lock:
            if self._state is LastEventState.UNRESOLVED:
                self._value, self._state = await self._compute()
                # Drop the handle so it is never awaited again
                self._details = None
        return self._value

    def close(self) -> None:
        """Release an unread detailed fetch. Later reads return an empty string."""
        if self._state is LastEventState.UNRESOLVED and not self._lock.locked():
            discard_fetch(self._details)
            self._details = None
            self._state = LastEventState.RESOLVED

    async def _compute(self) -> tuple[str, LastEventState]:
        fetched = await try_fetch(self._details)
        if not fetched.success:
            self._logger.warning(
                "detailed_history_fetch_failed instance_id=%s error_type=%s error=%s",
                self._instance_id,
                fetched.error_type,
                fetched.error,
            )
            return "", LastEventState.FAILED

        details = fetched.value
        history = getattr(details, "history", None)
        if not history:
            return "", LastEventState.RESOLVED
        return find_last_event_name(history), LastEventState.RESOLVED


def find_last_event_name(history: Sequence[HistoryEvent]) -> str:
    """Name of the most recent event exposing Name (or else FunctionName), or ""."""
    for event in reversed(history):
        name = event.get(NAME_KEY)
        if name is None:
            name = event.get(FUNCTION_NAME_KEY)
        if name is not None:
            return str(name)
    return ""
