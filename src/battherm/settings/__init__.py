"""Application settings management.

This package provides:
- UserSettings: User-configurable settings loaded from config.yaml
- ApplicationSettings: Internal application settings and defaults
"""

from battherm.settings.application import ApplicationSettings, AppPaths
from battherm.settings.user import SensorSettings, UserSettings

__all__ = ["AppPaths", "ApplicationSettings", "SensorSettings", "UserSettings"]
