"""Status enricher - composes entity classification, correlation and last event."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from core.application.dtos.orchestration_dto import EntityIdDTO, ExpandedOrchestrationStatusDTO
from core.domain.entities.orchestration_status import HistoryEvent, OrchestrationStatus
from core.domain.enums.entity_type import EntityType
from core.domain.enums.runtime_status import OrchestrationRuntimeStatus
from core.domain.value_objects.entity_id import EntityId, classify_instance_id
from core.infrastructure.logging import get_logger
from core.settings import MonitorSettings, get_app_settings

from .correlator import SubOrchestrationCorrelator, SubOrchestrationsSource
from .fetch import discard_fetch
from .last_event import DetailsSource, LastEventResolver


@dataclass(frozen=True)
class ExpandedOrchestrationStatus:
    """Orchestration status plus the fields the monitoring UI derives from it.

    ``entity_type`` is DURABLE_ENTITY exactly when the instance id has the
    "@type@key" form. The last event is resolved on first read and then
    stays fixed for the lifetime of the instance.
    """

    instance_id: str
    name: str | None
    created_time: datetime | None
    last_updated_time: datetime | None
    input: Any
    output: Any
    runtime_status: OrchestrationRuntimeStatus | str
    custom_status: Any
    history: Sequence[HistoryEvent] | None
    entity_type: EntityType
    entity_id: EntityId | None
    _last_event: LastEventResolver = field(repr=False, compare=False)

    async def get_last_event(self) -> str:
        """Name of the most recent named event in the detailed history ("" if unknown)."""
        return await self._last_event.resolve()

    def close(self) -> None:
        """Release the detailed fetch if the last event was never read."""
        self._last_event.close()

    async def to_dto(self) -> ExpandedOrchestrationStatusDTO:
        runtime_status = self.runtime_status
        if isinstance(runtime_status, OrchestrationRuntimeStatus):
            runtime_status = runtime_status.value
        return ExpandedOrchestrationStatusDTO(
            name=self.name,
            instance_id=self.instance_id,
            created_time=self.created_time,
            last_updated_time=self.last_updated_time,
            input=self.input,
            output=self.output,
            runtime_status=runtime_status,
            custom_status=self.custom_status,
            history=list(self.history) if self.history is not None else None,
            entity_type=self.entity_type,
            entity_id=EntityIdDTO.from_entity_id(self.entity_id) if self.entity_id else None,
            last_event=await self.get_last_event(),
        )

    async def to_dict(self) -> dict[str, Any]:
        """JSON-ready record with camelCase keys, as served to the UI."""
        dto = await self.to_dto()
        return dto.model_dump(mode="json", by_alias=True)


class StatusEnricher:
    """Builds ExpandedOrchestrationStatus records from raw statuses."""

    def __init__(
        self,
        settings: MonitorSettings | None = None,
        correlator: SubOrchestrationCorrelator | None = None,
    ) -> None:
        """Initialize enricher.

        Args:
            settings: MonitorSettings (defaults to the cached app settings)
            correlator: SubOrchestrationCorrelator to use for history linking
        """
        self._settings = settings or get_app_settings().monitor
        self._correlator = correlator or SubOrchestrationCorrelator()
        self._logger = get_logger("orchestration.enricher")

    async def enrich(
        self,
        status: OrchestrationStatus,
        details: DetailsSource | None = None,
        sub_orchestrations: SubOrchestrationsSource | None = None,
    ) -> ExpandedOrchestrationStatus:
        """Enrich a status record.

        Args:
            status: Base status, copied field by field and never modified
            details: Optional pending fetch of the detailed history, read lazily.
                Pass a Task when the last event may never be read, or call
                close() on the result once it is served.
            sub_orchestrations: Optional pending fetch of the child executions

        Returns:
            ExpandedOrchestrationStatus
        """
        entity_type, entity_id = classify_instance_id(status.instance_id)

        history = status.history
        if sub_orchestrations is not None and self._settings.correlate_sub_orchestrations:
            history = await self._correlator.correlate(
                status.history, sub_orchestrations, instance_id=status.instance_id
            )
        else:
            discard_fetch(sub_orchestrations)

        if not self._settings.resolve_last_event:
            discard_fetch(details)
            details = None

        self._logger.debug(
            "status_enriched instance_id=%s entity_type=%s lazy_last_event=%s",
            status.instance_id,
            entity_type.value,
            details is not None,
        )

        return ExpandedOrchestrationStatus(
            instance_id=status.instance_id,
            name=status.name,
            created_time=status.created_time,
            last_updated_time=status.last_updated_time,
            input=status.input,
            output=status.output,
            runtime_status=status.runtime_status,
            custom_status=status.custom_status,
            history=history,
            entity_type=entity_type,
            entity_id=entity_id,
            _last_event=LastEventResolver(details, instance_id=status.instance_id),
        )
