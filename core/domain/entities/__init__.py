"""Domain entities."""

from .orchestration_status import HistoryEvent, OrchestrationStatus
from .sub_orchestration import SubOrchestrationRecord

__all__ = [
    "HistoryEvent",
    "OrchestrationStatus",
    "SubOrchestrationRecord",
]
