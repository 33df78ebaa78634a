# Settings package
from core.settings.modules import AppSettings, MonitorSettings, get_app_settings

__all__ = ["get_app_settings", "AppSettings", "MonitorSettings"]
