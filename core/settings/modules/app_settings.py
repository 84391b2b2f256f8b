from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

from core.settings.modules.auth_settings import AuthSettings
from core.settings.modules.database_settings import DatabaseSettings
from core.settings.modules.server_settings import ServerSettings


class AppSettings(BaseModel):
    """
    Application settings aggregator.

    Built once at process start and passed explicitly to `create_app()`;
    nothing below the API layer reads the environment.
    """

    model_config = ConfigDict(extra="ignore")

    database: DatabaseSettings
    auth: AuthSettings
    server: ServerSettings


def load_app_settings(env_file: Optional[Path] = None) -> AppSettings:
    """Load `.env` (if present) into the environment and build every section."""
    load_dotenv(dotenv_path=env_file or Path.cwd() / ".env")
    return AppSettings(
        database=DatabaseSettings(),
        auth=AuthSettings(),
        server=ServerSettings(),
    )


@lru_cache()
def get_app_settings() -> AppSettings:
    """Return cached global settings for the process entrypoint."""
    return load_app_settings()
