"""Orchestration status as returned by the status store."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from core.domain.enums.runtime_status import OrchestrationRuntimeStatus

# A single history entry: an open key/value record
HistoryEvent = dict[str, Any]

EVENT_TYPE_KEY = "EventType"
FUNCTION_NAME_KEY = "FunctionName"
NAME_KEY = "Name"
SCHEDULED_TIME_KEY = "ScheduledTime"
SUB_ORCHESTRATION_ID_KEY = "subOrchestrationId"


@dataclass(frozen=True)
class OrchestrationStatus:
    """
    Raw status record of one execution instance.

    Owned by the collaborator that fetched it. The enrichment layer only
    reads it and copies fields out; history events are never mutated.
    """

    instance_id: str
    name: str | None = None
    created_time: datetime | None = None
    last_updated_time: datetime | None = None
    input: Any = None
    output: Any = None
    runtime_status: OrchestrationRuntimeStatus | str = OrchestrationRuntimeStatus.UNKNOWN
    custom_status: Any = None
    history: Sequence[HistoryEvent] | None = field(default=None)
