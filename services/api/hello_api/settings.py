"""Application settings via Pydantic Settings."""

from functools import lru_cache
from urllib.parse import quote_plus, urlparse

from pydantic import AliasChoices, Field, SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Schemes accepted by redis.asyncio.from_url
REDIS_SCHEMES = {"redis", "rediss", "unix"}


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Hello Worlds API"
    app_version: str = "0.1.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = Field(
        default=4000,
        validation_alias=AliasChoices("PORT"),
        ge=1,
        le=65535,
    )

    # Cache store (Redis)
    redis_url: str = "redis://localhost:6379/0"

    @field_validator("redis_url")
    @classmethod
    def _check_redis_scheme(cls, v: str) -> str:
        scheme = urlparse(v).scheme.lower()
        if scheme not in REDIS_SCHEMES:
            raise ValueError(
                f"REDIS_URL must use one of the schemes {sorted(REDIS_SCHEMES)}, got {v!r}"
            )
        return v

    # Document store (MongoDB)
    db_user: str | None = Field(default=None, validation_alias=AliasChoices("DB_USER"))
    db_password: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("DB_PASSWORD"),
    )
    db_host: str = Field(default="mongo", validation_alias=AliasChoices("DB_HOST"), min_length=1)
    db_port: int = Field(
        default=27017,
        validation_alias=AliasChoices("DB_PORT"),
        ge=1,
        le=65535,
    )

    @model_validator(mode="after")
    def _check_db_credentials(self) -> "Settings":
        has_password = bool(self.db_password and self.db_password.get_secret_value())
        if has_password and not self.db_user:
            raise ValueError("DB_PASSWORD is set but DB_USER is missing")
        if self.db_user and not has_password:
            raise ValueError("DB_USER is set but DB_PASSWORD is missing")
        return self

    @property
    def mongo_uri(self) -> str:
        """Document store URI assembled from the DB_* settings.

        User and password are percent-encoded; without credentials the
        user:password@ part is omitted.
        """
        credentials = ""
        if self.db_user:
            credentials = quote_plus(self.db_user)
            password = self.db_password.get_secret_value() if self.db_password else ""
            credentials = f"{credentials}:{quote_plus(password)}@"
        return f"mongodb://{credentials}{self.db_host}:{self.db_port}"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
