"""Name-based (version 5) UUID derivation.

The namespace is serialized in network byte order, the name bytes are appended
and the buffer is hashed with SHA-1. The first 16 digest octets are read as the
RFC 4122 field record, the version and variant bits are overwritten, and the
result is packed back into a UUID.

SHA-1 is used because version 5 is defined with it, not as a security measure.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, replace
from uuid import RFC_4122, UUID

from nameid.core.byte_order import UUID_BYTE_LENGTH, from_network_order, to_network_order
from nameid.core.errors import InternalHashError

NAME_BASED_SHA1_VERSION = 5

_VERSION_MASK = 0x0FFF
_VARIANT_MASK = 0x3F
_VARIANT_RFC_4122_BITS = 0x80


@dataclass(frozen=True)
class UuidFields:
    time_low: int
    time_mid: int
    time_hi_and_version: int
    clock_seq_hi_and_reserved: int
    clock_seq_low: int
    node: int

    @classmethod
    def from_octets(cls, octets: bytes) -> UuidFields:
        if len(octets) != UUID_BYTE_LENGTH:
            raise ValueError(f"expected {UUID_BYTE_LENGTH} octets, got {len(octets)}")

        return cls(
            time_low=int.from_bytes(octets[0:4], "big"),
            time_mid=int.from_bytes(octets[4:6], "big"),
            time_hi_and_version=int.from_bytes(octets[6:8], "big"),
            clock_seq_hi_and_reserved=octets[8],
            clock_seq_low=octets[9],
            node=int.from_bytes(octets[10:16], "big"),
        )

    def with_version_and_variant(self, version: int = NAME_BASED_SHA1_VERSION) -> UuidFields:
        return replace(
            self,
            time_hi_and_version=(self.time_hi_and_version & _VERSION_MASK) | (version << 12),
            clock_seq_hi_and_reserved=(self.clock_seq_hi_and_reserved & _VARIANT_MASK) | _VARIANT_RFC_4122_BITS,
        )

    def to_octets(self) -> bytes:
        return (
            self.time_low.to_bytes(4, "big")
            + self.time_mid.to_bytes(2, "big")
            + self.time_hi_and_version.to_bytes(2, "big")
            + bytes((self.clock_seq_hi_and_reserved, self.clock_seq_low))
            + self.node.to_bytes(6, "big")
        )

    def to_uuid(self) -> UUID:
        return from_network_order(self.to_octets())


def hash_name(namespace: UUID, name: bytes) -> bytes:
    """SHA-1 over namespace octets followed by the name, truncated to 16 octets."""
    buffer = to_network_order(namespace) + bytes(name)
    try:
        digest = hashlib.sha1(buffer, usedforsecurity=False).digest()
    except ValueError as exc:
        raise InternalHashError(details={"reason": str(exc)}) from exc

    if len(digest) < UUID_BYTE_LENGTH:
        raise InternalHashError(details={"digest_length": len(digest)})

    return digest[:UUID_BYTE_LENGTH]


def derive_uuid5(namespace: UUID, name: bytes) -> UUID:
    fields = UuidFields.from_octets(hash_name(namespace, name)).with_version_and_variant()
    identifier = fields.to_uuid()

    if identifier.version != NAME_BASED_SHA1_VERSION or identifier.variant != RFC_4122:
        raise InternalHashError(
            message="Derived identifier failed the version/variant check",
            details={"identifier": str(identifier)},
        )

    return identifier


__all__ = [
    "NAME_BASED_SHA1_VERSION",
    "UuidFields",
    "derive_uuid5",
    "hash_name",
]
