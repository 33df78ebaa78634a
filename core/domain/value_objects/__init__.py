"""Domain value objects."""

from .entity_id import ENTITY_ID_PATTERN, EntityId, classify_instance_id
from .timestamps import Instant, to_utc, to_utc_instant

__all__ = [
    "ENTITY_ID_PATTERN",
    "EntityId",
    "Instant",
    "classify_instance_id",
    "to_utc",
    "to_utc_instant",
]
