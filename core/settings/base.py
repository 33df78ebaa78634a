# core/settings/base.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class MonitorBaseSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
        extra="ignore",
    )
