"""Sub-orchestration record - projection of a child execution."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class SubOrchestrationRecord:
    """Child execution as listed in the parent's history table."""

    instance_id: str
    name: str
    timestamp: datetime
