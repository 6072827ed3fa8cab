from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(str, Enum):
    NAME_FILE_NOT_FOUND = "NAME_FILE_NOT_FOUND"
    NAME_INPUT_MISSING = "NAME_INPUT_MISSING"
    INTERNAL_HASH_ERROR = "INTERNAL_HASH_ERROR"


class ErrorDetail(BaseModel):
    code: str
    message: str
    details: Any | None = Field(default=None)


class ErrorPayload(BaseModel):
    error: ErrorDetail


DEFAULT_MESSAGES: dict[str, str] = {
    ErrorCode.NAME_FILE_NOT_FOUND.value: "Name file does not exist or is not readable",
    ErrorCode.NAME_INPUT_MISSING.value: "Either a file path or literal content is required",
    ErrorCode.INTERNAL_HASH_ERROR.value: "Hashing failed while deriving the identifier",
}


class NameIdError(Exception):
    def __init__(
        self,
        *,
        code: ErrorCode | str,
        message: str | None = None,
        details: Any | None = None,
    ) -> None:
        self.code = code.value if isinstance(code, ErrorCode) else code
        self.message = message or DEFAULT_MESSAGES.get(self.code, "Identifier derivation failed")
        self.details = details
        super().__init__(self.message)

    def to_payload(self) -> dict[str, Any]:
        return make_error_payload(self.code, self.message, self.details)


class NotFoundError(NameIdError):
    def __init__(self, message: str | None = None, details: Any | None = None) -> None:
        super().__init__(code=ErrorCode.NAME_FILE_NOT_FOUND, message=message, details=details)


class MissingInputError(NameIdError):
    def __init__(self, message: str | None = None, details: Any | None = None) -> None:
        super().__init__(code=ErrorCode.NAME_INPUT_MISSING, message=message, details=details)


class InternalHashError(NameIdError):
    def __init__(self, message: str | None = None, details: Any | None = None) -> None:
        super().__init__(code=ErrorCode.INTERNAL_HASH_ERROR, message=message, details=details)


def make_error_payload(code: ErrorCode | str, message: str, details: Any | None = None) -> dict[str, Any]:
    code_value = code.value if isinstance(code, ErrorCode) else code
    return ErrorPayload(
        error=ErrorDetail(
            code=code_value,
            message=message,
            details=details,
        )
    ).model_dump(exclude_none=True)


__all__ = [
    "ErrorCode",
    "ErrorPayload",
    "InternalHashError",
    "MissingInputError",
    "NameIdError",
    "NotFoundError",
    "make_error_payload",
]
