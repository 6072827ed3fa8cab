from __future__ import annotations

from pathlib import Path
from uuid import UUID

import structlog

from nameid.core.config import get_settings
from nameid.core.derivation import derive_uuid5
from nameid.core.namespaces import resolve_namespace
from nameid.schemas.derive import DeriveRequest, DeriveResult
from nameid.schemas.enums import FileReadMode
from nameid.services.name_source import resolve_name_bytes

logger = structlog.get_logger(__name__)


def derive_request(request: DeriveRequest) -> DeriveResult:
    settings = get_settings()
    context = request.context or settings.default_namespace
    name = resolve_name_bytes(
        file_path=request.file_path,
        content=request.content,
        mode=request.file_read_mode or settings.file_read_mode,
        encoding=request.file_encoding or settings.file_encoding,
    )

    identifier = derive_uuid5(context, name.data)

    logger.debug(
        "identifier_derived",
        identifier=str(identifier),
        context=str(context),
        source=name.source.value,
        name_length=len(name.data),
    )
    return DeriveResult(
        identifier=identifier,
        context=context,
        source=name.source,
        name_length=len(name.data),
    )


def derive(
    context: UUID | str | bytes | None = None,
    file_path: Path | str | None = None,
    content: str | bytes | None = None,
    *,
    file_read_mode: FileReadMode | str | None = None,
    file_encoding: str | None = None,
) -> UUID:
    """Derive the version-5 UUID of a name under ``context`` (ns:DNS unless configured otherwise).

    ``file_path`` wins over ``content`` when both are given. Raises
    ``NotFoundError`` for an unreadable file and ``MissingInputError`` when
    neither name source is supplied.
    """
    request = DeriveRequest(
        context=resolve_namespace(context) if context is not None else None,
        file_path=file_path,
        content=content,
        file_read_mode=file_read_mode,
        file_encoding=file_encoding,
    )
    return derive_request(request).identifier


__all__ = ["derive", "derive_request"]
