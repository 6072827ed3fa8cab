import locale
from functools import lru_cache
from typing import Any
from uuid import UUID

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from nameid.core.namespaces import DEFAULT_NAMESPACE, resolve_namespace
from nameid.schemas.enums import FileReadMode, OutputFormat

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "WARNING"


def platform_text_encoding() -> str:
    return locale.getpreferredencoding(False)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    default_namespace: UUID = Field(default=DEFAULT_NAMESPACE, alias="NAMEID_DEFAULT_NAMESPACE")
    file_read_mode: FileReadMode = Field(default=FileReadMode.TEXT, alias="NAMEID_FILE_READ_MODE")
    file_encoding: str = Field(default_factory=platform_text_encoding, alias="NAMEID_FILE_ENCODING")
    output_format: OutputFormat = Field(default=OutputFormat.CANONICAL, alias="NAMEID_OUTPUT_FORMAT")
    log_level: str = Field(default=DEFAULT_LOG_LEVEL, alias="LOG_LEVEL")

    @field_validator("default_namespace", mode="before")
    @classmethod
    def parse_default_namespace(cls, value: Any) -> UUID:
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_NAMESPACE
        return resolve_namespace(value)

    @field_validator("file_read_mode", "output_format", mode="before")
    @classmethod
    def normalize_choice(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("file_encoding")
    @classmethod
    def validate_file_encoding(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            return platform_text_encoding()
        try:
            "".encode(normalized)
        except LookupError as exc:
            raise ValueError(f"NAMEID_FILE_ENCODING is not a known codec: {normalized}") from exc
        return normalized

    # LOG_LEVEL is shared with other tools, so unknown values must not break derivation.
    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Any) -> str:
        normalized = str(value or "").strip().upper()
        if normalized not in LOG_LEVELS:
            return DEFAULT_LOG_LEVEL
        return normalized


@lru_cache
def get_settings() -> Settings:
    return Settings()
