from __future__ import annotations

import codecs
from dataclasses import dataclass
from pathlib import Path

import structlog

from nameid.core.errors import MissingInputError, NotFoundError
from nameid.schemas.enums import FileReadMode, NameSource

logger = structlog.get_logger(__name__)

_UTF8_CODEC_NAMES = {"utf-8", "utf-8-sig"}


@dataclass(frozen=True)
class NameBytes:
    data: bytes
    source: NameSource


def resolve_name_bytes(
    *,
    file_path: Path | str | None,
    content: str | bytes | None,
    mode: FileReadMode,
    encoding: str,
) -> NameBytes:
    if file_path is not None:
        if content is not None:
            logger.debug("name_content_ignored", reason="file_path_takes_precedence")
        return NameBytes(data=read_name_file(Path(file_path), mode=mode, encoding=encoding), source=NameSource.FILE)

    if content is None:
        raise MissingInputError()

    if isinstance(content, bytes):
        return NameBytes(data=content, source=NameSource.CONTENT)

    return NameBytes(data=content.encode("utf-8", errors="surrogateescape"), source=NameSource.CONTENT)


def read_name_file(path: Path, *, mode: FileReadMode, encoding: str) -> bytes:
    if not path.is_file():
        logger.warning("name_file_missing", file_path=str(path))
        raise NotFoundError(details={"file_path": str(path)})

    try:
        with path.open("rb") as file_obj:
            raw = file_obj.read()
    except OSError as exc:
        logger.warning("name_file_unreadable", file_path=str(path), error=str(exc))
        raise NotFoundError(
            message="Name file is not readable",
            details={"file_path": str(path), "reason": exc.strerror or str(exc)},
        ) from exc

    if mode is FileReadMode.RAW:
        return raw

    return reencode_as_utf8(raw, encoding)


def reencode_as_utf8(raw: bytes, encoding: str) -> bytes:
    """Decode file bytes as text in ``encoding`` and encode the text as UTF-8.

    Undecodable bytes become U+FFFD, so for files that are not valid in
    ``encoding`` the result differs from the raw bytes. A UTF-8 byte-order mark
    is stripped when reading with a UTF-8 codec.
    """
    codec_name = codecs.lookup(encoding).name
    if codec_name in _UTF8_CODEC_NAMES:
        text = raw.decode("utf-8-sig", errors="replace")
    else:
        text = raw.decode(codec_name, errors="replace")
    return text.encode("utf-8")


__all__ = ["NameBytes", "read_name_file", "reencode_as_utf8", "resolve_name_bytes"]
