# Settings modules
from .app_settings import AppSettings, get_app_settings
from .monitor_settings import MonitorSettings

__all__ = [
    "AppSettings",
    "get_app_settings",
    "MonitorSettings",
]
