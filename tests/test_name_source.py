from __future__ import annotations

from pathlib import Path

import pytest

from nameid.core.errors import MissingInputError, NotFoundError
from nameid.schemas.enums import FileReadMode, NameSource
from nameid.services.name_source import reencode_as_utf8, resolve_name_bytes


def test_content_is_utf8_encoded() -> None:
    name = resolve_name_bytes(file_path=None, content="café", mode=FileReadMode.TEXT, encoding="utf-8")

    assert name.data == b"caf\xc3\xa9"
    assert name.source == NameSource.CONTENT


def test_empty_content_is_allowed() -> None:
    name = resolve_name_bytes(file_path=None, content="", mode=FileReadMode.TEXT, encoding="utf-8")

    assert name.data == b""


def test_bytes_content_is_used_unchanged() -> None:
    name = resolve_name_bytes(file_path=None, content=b"caf\xe9", mode=FileReadMode.TEXT, encoding="utf-8")

    assert name.data == b"caf\xe9"
    assert name.source == NameSource.CONTENT


def test_surrogate_escaped_content_maps_back_to_original_bytes() -> None:
    name = resolve_name_bytes(file_path=None, content="caf\udce9", mode=FileReadMode.TEXT, encoding="utf-8")

    assert name.data == b"caf\xe9"


def test_missing_input_raises() -> None:
    with pytest.raises(MissingInputError) as exc_info:
        resolve_name_bytes(file_path=None, content=None, mode=FileReadMode.TEXT, encoding="utf-8")

    assert exc_info.value.code == "NAME_INPUT_MISSING"


def test_missing_file_raises_not_found(tmp_path: Path) -> None:
    missing = tmp_path / "does-not-exist.txt"

    with pytest.raises(NotFoundError) as exc_info:
        resolve_name_bytes(file_path=missing, content=None, mode=FileReadMode.TEXT, encoding="utf-8")

    assert exc_info.value.details == {"file_path": str(missing)}


def test_directory_is_not_a_name_file(tmp_path: Path) -> None:
    with pytest.raises(NotFoundError):
        resolve_name_bytes(file_path=tmp_path, content=None, mode=FileReadMode.RAW, encoding="utf-8")


def test_unreadable_file_raises_not_found(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "locked.txt"
    path.write_bytes(b"secret")

    def _deny(*_args: object, **_kwargs: object) -> object:
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(Path, "open", _deny)

    with pytest.raises(NotFoundError) as exc_info:
        resolve_name_bytes(file_path=path, content=None, mode=FileReadMode.RAW, encoding="utf-8")

    assert exc_info.value.details["reason"] == "Permission denied"


def test_file_takes_precedence_over_content(tmp_path: Path) -> None:
    path = tmp_path / "name.txt"
    path.write_bytes(b"from-file")

    name = resolve_name_bytes(file_path=path, content="ignored", mode=FileReadMode.TEXT, encoding="utf-8")

    assert name.data == b"from-file"
    assert name.source == NameSource.FILE


def test_text_mode_reencodes_legacy_encoding(tmp_path: Path) -> None:
    path = tmp_path / "latin.txt"
    path.write_bytes(b"caf\xe9")

    text_name = resolve_name_bytes(file_path=path, content=None, mode=FileReadMode.TEXT, encoding="cp1252")
    raw_name = resolve_name_bytes(file_path=path, content=None, mode=FileReadMode.RAW, encoding="cp1252")

    assert text_name.data == "café".encode("utf-8")
    assert raw_name.data == b"caf\xe9"


def test_text_mode_replaces_undecodable_bytes() -> None:
    assert reencode_as_utf8(b"a\xffb", "utf-8") == "a\ufffdb".encode("utf-8")


def test_text_mode_strips_utf8_bom_and_keeps_line_endings() -> None:
    assert reencode_as_utf8(b"\xef\xbb\xbfline1\r\nline2\n", "UTF8") == b"line1\r\nline2\n"
