"""Sub-orchestration correlator - links history events to child instances."""

from collections.abc import Awaitable, Iterable, Sequence
from dataclasses import dataclass

from core.domain.entities.orchestration_status import (
    EVENT_TYPE_KEY,
    FUNCTION_NAME_KEY,
    SCHEDULED_TIME_KEY,
    SUB_ORCHESTRATION_ID_KEY,
    HistoryEvent,
)
from core.domain.entities.sub_orchestration import SubOrchestrationRecord
from core.domain.enums.history_event_type import SUB_ORCHESTRATION_EVENT_TYPES
from core.domain.value_objects.timestamps import to_utc_instant
from core.infrastructure.logging import get_logger

from .fetch import discard_fetch, try_fetch

SubOrchestrationsSource = Awaitable[Iterable[SubOrchestrationRecord]]


@dataclass(frozen=True)
class _Candidate:
    """A sub-orchestration history event and its position in the history."""

    index: int
    event: HistoryEvent


class SubOrchestrationCorrelator:
    """Annotates completed/failed sub-orchestration events with the child instance id.

    Children are matched by function name and exact scheduled time. Each
    child consumes the first still-unmatched candidate event, so children
    sharing a name and timestamp are paired one-to-one in the order the
    source returns them.
    """

    def __init__(self) -> None:
        self._logger = get_logger("orchestration.correlator")

    async def correlate(
        self,
        history: Sequence[HistoryEvent] | None,
        sub_orchestrations: SubOrchestrationsSource,
        instance_id: str | None = None,
    ) -> list[HistoryEvent] | None:
        """Correlate a parent's history with its child executions.

        Args:
            history: Parent history, in chronological order
            sub_orchestrations: Pending fetch of the parent's child records
            instance_id: Parent instance id, for logging only

        Returns:
            New history list with matched events carrying the child id,
            or None when history is None. The input is never mutated.
        """
        if history is None:
            discard_fetch(sub_orchestrations)
            return None

        candidates = tuple(
            _Candidate(index=index, event=event)
            for index, event in enumerate(history)
            if event.get(EVENT_TYPE_KEY) in SUB_ORCHESTRATION_EVENT_TYPES
        )
        if not candidates:
            discard_fetch(sub_orchestrations)
            return list(history)

        fetched = await try_fetch(sub_orchestrations)
        if not fetched.success:
            self._logger.warning(
                "sub_orchestrations_fetch_failed instance_id=%s error_type=%s error=%s",
                instance_id,
                fetched.error_type,
                fetched.error,
            )
            return list(history)

        annotations: dict[int, str] = {}
        remaining = list(candidates)
        try:
            for record in fetched.value or ():
                position = _find_first_match(remaining, record)
                if position is None:
                    continue
                annotations[remaining[position].index] = record.instance_id
                # One child per event
                del remaining[position]
        except Exception:
            self._logger.warning(
                "sub_orchestration_matching_failed instance_id=%s matched=%d",
                instance_id,
                len(annotations),
                exc_info=True,
            )

        self._logger.debug(
            "sub_orchestrations_correlated instance_id=%s candidates=%d matched=%d",
            instance_id,
            len(candidates),
            len(annotations),
        )
        return _annotate(history, annotations)


def _find_first_match(candidates: list[_Candidate], record: SubOrchestrationRecord) -> int | None:
    started_at = to_utc_instant(record.timestamp)
    if started_at is None:
        return None
    for position, candidate in enumerate(candidates):
        event = candidate.event
        if event.get(FUNCTION_NAME_KEY) != record.name:
            continue
        if to_utc_instant(event.get(SCHEDULED_TIME_KEY)) == started_at:
            return position
    return None


def _annotate(history: Sequence[HistoryEvent], annotations: dict[int, str]) -> list[HistoryEvent]:
    return [
        {**event, SUB_ORCHESTRATION_ID_KEY: annotations[index]} if index in annotations else event
        for index, event in enumerate(history)
    ]
