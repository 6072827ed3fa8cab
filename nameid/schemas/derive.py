from __future__ import annotations

from pathlib import Path
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from nameid.core.namespaces import resolve_namespace
from nameid.schemas.enums import FileReadMode, NameSource


class DeriveRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    context: UUID | None = None
    file_path: Path | None = None
    content: str | bytes | None = None
    file_read_mode: FileReadMode | None = None
    file_encoding: str | None = None

    @field_validator("context", mode="before")
    @classmethod
    def parse_context(cls, value: Any) -> UUID | None:
        if value is None:
            return None
        return resolve_namespace(value)

    @field_validator("file_encoding")
    @classmethod
    def validate_file_encoding(cls, value: str | None) -> str | None:
        if value is None:
            return None

        normalized = value.strip()
        if not normalized:
            raise ValueError("file_encoding cannot be empty")
        try:
            "".encode(normalized)
        except LookupError as exc:
            raise ValueError(f"unknown codec: {normalized}") from exc
        return normalized


class DeriveResult(BaseModel):
    identifier: UUID
    context: UUID
    source: NameSource
    name_length: int = Field(ge=0)
