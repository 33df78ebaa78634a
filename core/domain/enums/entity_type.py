"""
Entity Type Enum.

Distinguishes plain orchestrations from durable entities.
"""
from enum import Enum


class EntityType(str, Enum):
    """Kind of execution instance."""

    ORCHESTRATION = "Orchestration"
    DURABLE_ENTITY = "DurableEntity"
