"""
Orchestration Runtime Status Enum.

Status values reported by the orchestration runtime.
"""
from enum import Enum


class OrchestrationRuntimeStatus(str, Enum):
    """Runtime status values."""

    RUNNING = "Running"
    COMPLETED = "Completed"
    CONTINUED_AS_NEW = "ContinuedAsNew"
    FAILED = "Failed"
    CANCELED = "Canceled"
    TERMINATED = "Terminated"
    PENDING = "Pending"
    UNKNOWN = "Unknown"

    @classmethod
    def parse(cls, value: "str | OrchestrationRuntimeStatus | None") -> "OrchestrationRuntimeStatus | str":
        """Map a wire value onto the enum, keeping unrecognised values as-is."""
        if value is None:
            return cls.UNKNOWN
        if isinstance(value, cls):
            return value
        for member in cls:
            if member.value.lower() == str(value).lower():
                return member
        return str(value)
