# Settings package
from core.settings.modules import (
    AppSettings,
    AuthSettings,
    DatabaseSettings,
    ServerSettings,
    get_app_settings,
    load_app_settings,
)

__all__ = [
    "get_app_settings",
    "load_app_settings",
    "AppSettings",
    "AuthSettings",
    "DatabaseSettings",
    "ServerSettings",
]
