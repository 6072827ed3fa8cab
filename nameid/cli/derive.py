from __future__ import annotations

import argparse
import os
from pathlib import Path
from uuid import UUID

import structlog
from pydantic import ValidationError

from nameid.core.config import LOG_LEVELS, get_settings
from nameid.core.errors import MissingInputError, NotFoundError
from nameid.core.logging import configure_logging
from nameid.core.namespaces import resolve_namespace
from nameid.schemas.derive import DeriveRequest
from nameid.schemas.enums import FileReadMode, OutputFormat
from nameid.services.formatting import format_identifier
from nameid.services.identifier import derive_request

logger = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Derive a name-based (version 5) UUID from text or a file")
    parser.add_argument(
        "--context",
        "-n",
        type=_namespace,
        default=None,
        help="Namespace UUID or alias (dns, url, oid, x500); defaults to NAMEID_DEFAULT_NAMESPACE or dns",
    )
    parser.add_argument(
        "--content",
        "-c",
        default=None,
        help="Literal name; the argument's command-line bytes are hashed as given (UTF-8 text on UTF-8 locales)",
    )
    parser.add_argument("--file", "-f", type=Path, default=None, help="Read the name from this file")
    parser.add_argument(
        "--file-mode",
        choices=[mode.value for mode in FileReadMode],
        default=None,
        help="text: decode with --encoding and re-encode as UTF-8; raw: hash the file bytes unchanged",
    )
    parser.add_argument("--encoding", default=None, help="Text encoding used to decode files in text mode")
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=[output_format.value for output_format in OutputFormat],
        default=None,
        help="Output rendering of the identifier",
    )
    parser.add_argument(
        "--log-level",
        choices=list(LOG_LEVELS),
        default=None,
        help="Log level",
    )
    return parser


def _namespace(value: str) -> UUID:
    try:
        return resolve_namespace(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def run(args: argparse.Namespace) -> int:
    settings = get_settings()
    configure_logging(args.log_level or settings.log_level)

    try:
        request = DeriveRequest(
            context=args.context,
            file_path=args.file,
            content=os.fsencode(args.content) if args.content is not None else None,
            file_read_mode=args.file_mode,
            file_encoding=args.encoding,
        )
    except ValidationError as exc:
        logger.error("derive_invalid_request", details=exc.errors(include_url=False, include_context=False))
        return 1

    try:
        result = derive_request(request)
    except (NotFoundError, MissingInputError) as exc:
        logger.error("derive_failed", **exc.to_payload()["error"])
        return 1

    print(format_identifier(result.identifier, args.output_format or settings.output_format))
    return 0


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()
    return run(args)


if __name__ == "__main__":
    raise SystemExit(main())
