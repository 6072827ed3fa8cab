from __future__ import annotations

from uuid import UUID

from nameid.schemas.enums import ByteLayout

UUID_BYTE_LENGTH = 16

# time_low, time_mid, time_hi_and_version; the trailing 8 bytes are stored octet by octet.
_SWAPPED_FIELD_SLICES = (slice(0, 4), slice(4, 6), slice(6, 8))


def _require_uuid_length(data: bytes) -> None:
    if len(data) != UUID_BYTE_LENGTH:
        raise ValueError(f"expected {UUID_BYTE_LENGTH} bytes, got {len(data)}")


def swap_field_order(data: bytes) -> bytes:
    """Reverse the first three UUID fields; converts between network and GUID layouts both ways."""
    _require_uuid_length(data)
    swapped = b"".join(data[field][::-1] for field in _SWAPPED_FIELD_SLICES)
    return swapped + data[8:]


def to_layout(network_bytes: bytes, layout: ByteLayout) -> bytes:
    _require_uuid_length(network_bytes)
    if layout is ByteLayout.GUID:
        return swap_field_order(network_bytes)
    return bytes(network_bytes)


def to_network_order(identifier: UUID) -> bytes:
    # uuid.UUID keeps its 128-bit integer in RFC 4122 order, so .bytes needs no reversal.
    return identifier.bytes


def from_network_order(data: bytes) -> UUID:
    _require_uuid_length(data)
    return UUID(bytes=bytes(data))


__all__ = [
    "UUID_BYTE_LENGTH",
    "from_network_order",
    "swap_field_order",
    "to_layout",
    "to_network_order",
]
