from nameid.schemas.derive import DeriveRequest, DeriveResult
from nameid.schemas.enums import ByteLayout, FileReadMode, NameSource, OutputFormat

__all__ = [
    "ByteLayout",
    "DeriveRequest",
    "DeriveResult",
    "FileReadMode",
    "NameSource",
    "OutputFormat",
]
