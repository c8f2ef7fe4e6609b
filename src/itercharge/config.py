"""Runtime configuration helpers."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FILE_NAME = "itercharge.log"


def log_file_path(directory: str | Path) -> Path:
    return Path(directory) / LOG_FILE_NAME


class Settings(BaseSettings):
    """Load configuration from environment variables or `.env`."""

    log_level: str = Field("INFO", alias="ITERCHARGE_LOG_LEVEL")
    log_directory: Path | None = Field(None, alias="ITERCHARGE_LOG_DIRECTORY")
    json_indent: int | None = Field(None, ge=0, alias="ITERCHARGE_JSON_INDENT")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def log_file(self) -> Path | None:
        if self.log_directory is None:
            return None
        return log_file_path(self.log_directory)


settings = Settings()
