from __future__ import annotations

from pydantic import Field, SecretStr, field_validator

from core.settings.base_settings import CookieBaseSettings


class AuthSettings(CookieBaseSettings):
    """
    Token signing and password hashing settings.

    JWT_SECRET has no default: the service refuses to start without it.
    """

    jwt_secret: SecretStr = Field(..., alias="JWT_SECRET")
    jwt_algorithm: str = Field("HS256", alias="JWT_ALGORITHM")
    token_ttl_hours: int = Field(24, gt=0, alias="JWT_TTL_HOURS")
    bcrypt_rounds: int = Field(10, ge=4, le=31, alias="BCRYPT_ROUNDS")

    @field_validator("jwt_secret")
    @classmethod
    def _secret_not_blank(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value().strip():
            raise ValueError("JWT_SECRET must not be empty")
        return value
