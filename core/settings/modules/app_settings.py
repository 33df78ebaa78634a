from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

from core.settings.modules.monitor_settings import MonitorSettings

_PROJECT_ROOT = Path(__file__).resolve().parents[3]


class AppSettings(BaseModel):
    """Application settings aggregator."""

    model_config = ConfigDict(extra="ignore")

    monitor: MonitorSettings

    @property
    def log_level(self) -> str:
        return self.monitor.log_level


@lru_cache()
def get_app_settings() -> AppSettings:
    # Load environment variables ONCE before any settings objects are created
    load_dotenv(dotenv_path=_PROJECT_ROOT / ".env")
    return AppSettings(monitor=MonitorSettings())
