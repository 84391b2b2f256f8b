from __future__ import annotations

from pydantic import Field

from core.settings.base_settings import CookieBaseSettings


class DatabaseSettings(CookieBaseSettings):
    """
    Relational store connection settings.
    Any SQLAlchemy async URL works; SQLite (aiosqlite) is the default.
    """

    database_url: str = Field(
        "sqlite+aiosqlite:///./cookie_orders.db", alias="DATABASE_URL"
    )
    echo_sql: bool = Field(False, alias="DB_ECHO_SQL")
