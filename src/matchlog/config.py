"""Process configuration.

Settings are read from the environment once at startup and passed to the
app factory and storage constructors. Request handlers never read the
environment themselves.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def normalize_database_url(url: str) -> str:
    """Point bare Postgres URLs at the psycopg driver.

    Hosting platforms commonly hand out ``postgres://`` URLs, which
    SQLAlchemy no longer accepts.
    """
    if url.startswith("postgres://"):
        return "postgresql+psycopg://" + url[len("postgres://"):]
    if url.startswith("postgresql://"):
        return "postgresql+psycopg://" + url[len("postgresql://"):]
    return url


class Settings(BaseSettings):
    """Immutable process settings, one field per environment variable.

    PORT, HOST, DATA_DIR, DATABASE_URL, PUBLIC_DIR, LOG_LEVEL.
    """

    model_config = SettingsConfigDict(frozen=True)

    port: int = Field(default=3000)
    host: str = Field(default="0.0.0.0")
    data_dir: Path = Field(default=Path("data"))
    database_url: str | None = Field(default=None)
    public_dir: Path = Field(default=Path("public"))
    log_level: str = Field(default="INFO")

    @field_validator("*", mode="before")
    @classmethod
    def _empty_means_default(cls, value: Any, info: ValidationInfo) -> Any:
        # DATABASE_URL= (set but empty) selects the file backend
        if value == "":
            return cls.model_fields[info.field_name].default
        return value

    @field_validator("database_url")
    @classmethod
    def _normalize_url(cls, value: str | None) -> str | None:
        return normalize_database_url(value) if value is not None else None

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()

    @property
    def data_file(self) -> Path:
        """Location of the file backend's JSON document."""
        return self.data_dir / "matches.json"

    @property
    def uses_database(self) -> bool:
        return self.database_url is not None


def load_settings() -> Settings:
    """Build Settings from environment variables.

    Raises:
        pydantic.ValidationError: If a variable cannot be parsed (e.g. PORT).
    """
    return Settings()
