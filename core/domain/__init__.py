"""Domain layer - pure domain models."""

from .entities import HistoryEvent, OrchestrationStatus, SubOrchestrationRecord
from .enums import EntityType, HistoryEventType, OrchestrationRuntimeStatus
from .value_objects import EntityId, classify_instance_id, to_utc

__all__ = [
    "EntityId",
    "EntityType",
    "HistoryEvent",
    "HistoryEventType",
    "OrchestrationRuntimeStatus",
    "OrchestrationStatus",
    "SubOrchestrationRecord",
    "classify_instance_id",
    "to_utc",
]
