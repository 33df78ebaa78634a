"""Application DTOs."""

from .orchestration_dto import (
    EntityIdDTO,
    ExpandedOrchestrationStatusDTO,
    OrchestrationStatusDTO,
    SubOrchestrationRecordDTO,
)

__all__ = [
    "EntityIdDTO",
    "ExpandedOrchestrationStatusDTO",
    "OrchestrationStatusDTO",
    "SubOrchestrationRecordDTO",
]
