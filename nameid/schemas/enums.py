import enum


class ByteLayout(str, enum.Enum):
    NETWORK = "network"
    GUID = "guid"


class FileReadMode(str, enum.Enum):
    TEXT = "text"
    RAW = "raw"


class NameSource(str, enum.Enum):
    FILE = "file"
    CONTENT = "content"


class OutputFormat(str, enum.Enum):
    CANONICAL = "canonical"
    URN = "urn"
    HEX = "hex"
    BRACES = "braces"
    GUID_HEX = "guid-hex"
