# core/settings/base_settings.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class CookieBaseSettings(BaseSettings):
    """
    Common base for every settings section.

    Values come from process environment; `.env` is loaded into the
    environment once by `get_app_settings()` before sections are built.
    Fields may be passed by name as well as by env alias.
    """

    model_config = SettingsConfigDict(
        extra="ignore",
        populate_by_name=True,
    )
