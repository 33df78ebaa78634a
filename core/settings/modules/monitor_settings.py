from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, field_validator

from core.settings.base import MonitorBaseSettings

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class MonitorSettings(MonitorBaseSettings):
    """
    Settings for status enrichment.
    Loaded from .env with exact variable name matching.
    """

    log_level: LogLevel = Field(default="INFO", alias="MONITOR_LOG_LEVEL")
    correlate_sub_orchestrations: bool = Field(
        default=True, alias="MONITOR_CORRELATE_SUB_ORCHESTRATIONS"
    )
    resolve_last_event: bool = Field(default=True, alias="MONITOR_RESOLVE_LAST_EVENT")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value
