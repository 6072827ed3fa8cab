"""Well-known namespace identifiers (RFC 4122 Appendix C) and namespace parsing.

Changing a namespace changes every identifier derived under it, so these values
are fixed and must never be edited.
"""

from __future__ import annotations

from uuid import UUID

NAMESPACE_DNS = UUID("6ba7b810-9dad-11d1-80b4-00c04fd430c8")
NAMESPACE_URL = UUID("6ba7b811-9dad-11d1-80b4-00c04fd430c8")
NAMESPACE_OID = UUID("6ba7b812-9dad-11d1-80b4-00c04fd430c8")
NAMESPACE_X500 = UUID("6ba7b814-9dad-11d1-80b4-00c04fd430c8")

DEFAULT_NAMESPACE = NAMESPACE_DNS

WELL_KNOWN_NAMESPACES: dict[str, UUID] = {
    "dns": NAMESPACE_DNS,
    "url": NAMESPACE_URL,
    "oid": NAMESPACE_OID,
    "x500": NAMESPACE_X500,
}


def resolve_namespace(value: object) -> UUID:
    """Return the namespace UUID for a UUID, 16 network-order bytes, a UUID string or an alias."""
    if isinstance(value, UUID):
        return value

    if isinstance(value, (bytes, bytearray)):
        if len(value) != 16:
            raise ValueError(f"namespace bytes must be 16 bytes long, got {len(value)}")
        return UUID(bytes=bytes(value))

    if isinstance(value, str):
        normalized = value.strip()
        alias = WELL_KNOWN_NAMESPACES.get(normalized.lower())
        if alias is not None:
            return alias
        try:
            return UUID(normalized)
        except ValueError as exc:
            raise ValueError(f"invalid namespace identifier: {value!r}") from exc

    raise ValueError(f"unsupported namespace type: {type(value).__name__}")


__all__ = [
    "DEFAULT_NAMESPACE",
    "NAMESPACE_DNS",
    "NAMESPACE_OID",
    "NAMESPACE_URL",
    "NAMESPACE_X500",
    "WELL_KNOWN_NAMESPACES",
    "resolve_namespace",
]
