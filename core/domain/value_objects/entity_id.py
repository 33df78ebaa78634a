"""Entity identity value object and instance id classification."""

import re
from dataclasses import dataclass

from core.domain.enums.entity_type import EntityType

# Grammar of a durable entity instance id:
#
#   entity-id = "@" type "@" key
#   type      = 1*word-char       ; letters, digits, underscore
#   key       = 1*any-char        ; greedy, to end of input
#
# Matching is case-insensitive and unanchored: the first "@type@" marker
# found anywhere in the id wins.
ENTITY_ID_PATTERN = re.compile(r"@(\w+)@(.+)", re.IGNORECASE | re.DOTALL)


@dataclass(frozen=True)
class EntityId:
    """Identity of a durable entity: entity type name plus entity key."""

    type: str
    key: str

    @classmethod
    def parse(cls, instance_id: str) -> "EntityId | None":
        """Extract the entity identity from an instance id, if it encodes one."""
        if not isinstance(instance_id, str):
            raise TypeError(f"Instance id must be a string, got: {type(instance_id).__name__}")
        match = ENTITY_ID_PATTERN.search(instance_id)
        if match is None:
            return None
        return cls(type=match.group(1), key=match.group(2))

    def __str__(self) -> str:
        return f"@{self.type}@{self.key}"


def classify_instance_id(instance_id: str) -> tuple[EntityType, EntityId | None]:
    """
    Tell a durable entity apart from a plain orchestration.

    Args:
        instance_id: Execution instance id

    Returns:
        (DURABLE_ENTITY, EntityId) for "@type@key" ids, (ORCHESTRATION, None) otherwise
    """
    entity_id = EntityId.parse(instance_id)
    if entity_id is None:
        return EntityType.ORCHESTRATION, None
    return EntityType.DURABLE_ENTITY, entity_id
