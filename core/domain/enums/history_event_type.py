"""
History Event Type Enum.

Event type discriminators the enrichment layer acts on.
"""
from enum import Enum


class HistoryEventType(str, Enum):
    """History event types closing a sub-orchestration invocation."""

    SUB_ORCHESTRATION_INSTANCE_COMPLETED = "SubOrchestrationInstanceCompleted"
    SUB_ORCHESTRATION_INSTANCE_FAILED = "SubOrchestrationInstanceFailed"


# Events that can be linked to the child instance they report on
SUB_ORCHESTRATION_EVENT_TYPES = frozenset(member.value for member in HistoryEventType)
