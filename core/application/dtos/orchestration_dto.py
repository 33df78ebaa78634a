"""Application DTOs for orchestration status records."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from core.domain.entities.orchestration_status import OrchestrationStatus
from core.domain.entities.sub_orchestration import SubOrchestrationRecord
from core.domain.enums.entity_type import EntityType
from core.domain.enums.runtime_status import OrchestrationRuntimeStatus
from core.domain.value_objects.entity_id import EntityId


def _lower_first(key: str) -> str:
    return key[:1].lower() + key[1:] if key else key


class OrchestrationStatusDTO(BaseModel):
    """Status record as delivered by the status store (camelCase or PascalCase keys)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore", frozen=True)

    instance_id: str = Field(..., min_length=1, description="Execution instance ID")
    name: Optional[str] = Field(None, description="Orchestrator function name")
    created_time: Optional[datetime] = Field(None, description="Creation time")
    last_updated_time: Optional[datetime] = Field(None, description="Last update time")
    input: Any = Field(None, description="Orchestration input")
    output: Any = Field(None, description="Orchestration output")
    runtime_status: Optional[str] = Field(None, description="Runtime status")
    custom_status: Any = Field(None, description="Custom status payload")
    history: Optional[List[Dict[str, Any]]] = Field(None, description="History events")

    @model_validator(mode="before")
    @classmethod
    def _accept_pascal_case(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {_lower_first(k) if isinstance(k, str) else k: v for k, v in data.items()}
        return data

    def to_entity(self) -> OrchestrationStatus:
        """Convert to the domain status record."""
        return OrchestrationStatus(
            instance_id=self.instance_id,
            name=self.name,
            created_time=self.created_time,
            last_updated_time=self.last_updated_time,
            input=self.input,
            output=self.output,
            runtime_status=OrchestrationRuntimeStatus.parse(self.runtime_status),
            custom_status=self.custom_status,
            history=self.history,
        )


class SubOrchestrationRecordDTO(BaseModel):
    """Row of the history table describing a child execution."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    instance_id: str = Field(..., validation_alias=AliasChoices("instance_id", "instanceId", "InstanceId"))
    name: str = Field(..., validation_alias=AliasChoices("name", "Name"))
    timestamp: datetime = Field(
        ..., validation_alias=AliasChoices("timestamp", "Timestamp", "_Timestamp")
    )

    def to_entity(self) -> SubOrchestrationRecord:
        return SubOrchestrationRecord(
            instance_id=self.instance_id,
            name=self.name,
            timestamp=self.timestamp,
        )


class EntityIdDTO(BaseModel):
    """DTO for a durable entity identity."""

    type: str = Field(..., description="Entity type name")
    key: str = Field(..., description="Entity key")

    model_config = {"frozen": True}

    @classmethod
    def from_entity_id(cls, entity_id: EntityId) -> "EntityIdDTO":
        return cls(type=entity_id.type, key=entity_id.key)


class ExpandedOrchestrationStatusDTO(BaseModel):
    """Response DTO for an enriched orchestration status."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    name: Optional[str] = Field(None, description="Orchestrator function name")
    instance_id: str = Field(..., description="Execution instance ID")
    created_time: Optional[datetime] = Field(None, description="Creation time")
    last_updated_time: Optional[datetime] = Field(None, description="Last update time")
    input: Any = Field(None, description="Orchestration input")
    output: Any = Field(None, description="Orchestration output")
    runtime_status: Optional[str] = Field(None, description="Runtime status")
    custom_status: Any = Field(None, description="Custom status payload")
    history: Optional[List[Dict[str, Any]]] = Field(None, description="History events")
    entity_type: EntityType = Field(..., description="Orchestration or DurableEntity")
    entity_id: Optional[EntityIdDTO] = Field(None, description="Entity identity for durable entities")
    last_event: str = Field("", description="Most recent named event")
