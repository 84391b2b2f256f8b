from __future__ import annotations

from typing import Annotated, Any, List

from pydantic import Field, field_validator
from pydantic_settings import NoDecode

from core.settings.base_settings import CookieBaseSettings


class ServerSettings(CookieBaseSettings):
    """
    HTTP server and logging settings.

    CORS_ORIGINS is a comma separated list, e.g.
    ``http://localhost:3000,https://shop.example``.
    """

    host: str = Field("0.0.0.0", alias="HOST")
    port: int = Field(3000, alias="PORT")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    cors_origins: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["*"], alias="CORS_ORIGINS"
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value
