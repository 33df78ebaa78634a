"""Domain enums."""

from .entity_type import EntityType
from .history_event_type import HistoryEventType
from .runtime_status import OrchestrationRuntimeStatus

__all__ = [
    "EntityType",
    "HistoryEventType",
    "OrchestrationRuntimeStatus",
]
