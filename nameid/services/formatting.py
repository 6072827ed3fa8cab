from __future__ import annotations

from uuid import UUID

from nameid.core.byte_order import to_layout, to_network_order
from nameid.schemas.enums import ByteLayout, OutputFormat


def format_identifier(identifier: UUID, output_format: OutputFormat | str = OutputFormat.CANONICAL) -> str:
    output_format = OutputFormat(output_format)

    if output_format is OutputFormat.URN:
        return identifier.urn
    if output_format is OutputFormat.HEX:
        return identifier.hex
    if output_format is OutputFormat.BRACES:
        return f"{{{identifier}}}"
    if output_format is OutputFormat.GUID_HEX:
        return to_layout(to_network_order(identifier), ByteLayout.GUID).hex()
    return str(identifier)


__all__ = ["format_identifier"]
