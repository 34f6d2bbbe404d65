"""Runtime settings, read from the environment (or a local ``.env``)."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DATA_DIR = Path(__file__).resolve().parents[3] / "data"
DEFAULT_DATABASE_URL = "sqlite:///" + (DATA_DIR / "warehouse.db").as_posix()

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", populate_by_name=True, extra="ignore")

    database_url: str = Field(default=DEFAULT_DATABASE_URL, alias="WMS_DATABASE_URL")
    echo_sql: bool = Field(default=False, alias="WMS_ECHO_SQL")
    log_level: LogLevel = Field(default="WARNING", alias="WMS_LOG_LEVEL")
    cancel_command: str = Field(default="cancel", alias="WMS_CANCEL_COMMAND")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, v):
        return v.strip().upper() if isinstance(v, str) else v


def get_settings() -> Settings:
    return Settings()
