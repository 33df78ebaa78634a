"""Application layer - DTOs."""

from .dtos import (
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
