"""Orchestration layer - status enrichment for the monitoring UI."""

from core.domain.entities.orchestration_status import OrchestrationStatus

from .correlator import SubOrchestrationCorrelator, SubOrchestrationsSource
from .enricher import ExpandedOrchestrationStatus, StatusEnricher
from .fetch import FetchResult, try_fetch
from .last_event import DetailsSource, LastEventResolver, LastEventState, find_last_event_name

__all__ = [
    "DetailsSource",
    "ExpandedOrchestrationStatus",
    "FetchResult",
    "LastEventResolver",
    "LastEventState",
    "StatusEnricher",
    "SubOrchestrationCorrelator",
    "SubOrchestrationsSource",
    "expand_status",
    "find_last_event_name",
    "try_fetch",
]


async def expand_status(
    status: OrchestrationStatus,
    details: DetailsSource | None = None,
    sub_orchestrations: SubOrchestrationsSource | None = None,
) -> ExpandedOrchestrationStatus:
    """Enrich a status with a default StatusEnricher.

    Args:
        status: Base status record
        details: Optional pending detailed-history fetch
        sub_orchestrations: Optional pending child-records fetch

    Returns:
        ExpandedOrchestrationStatus instance
    """
    return await StatusEnricher().enrich(status, details, sub_orchestrations)
