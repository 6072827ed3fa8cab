from __future__ import annotations

from collections.abc import Iterator

import pytest

from nameid.core.config import get_settings

_SETTINGS_ENV_VARS = (
    "NAMEID_DEFAULT_NAMESPACE",
    "NAMEID_FILE_READ_MODE",
    "NAMEID_OUTPUT_FORMAT",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Keep file decoding independent of the host locale.
    monkeypatch.setenv("NAMEID_FILE_ENCODING", "utf-8")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
