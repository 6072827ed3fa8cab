from __future__ import annotations

import argparse

from nameid.core.namespaces import WELL_KNOWN_NAMESPACES


def build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(description="List the well-known namespace aliases")


def run(_args: argparse.Namespace) -> int:
    for alias, namespace in WELL_KNOWN_NAMESPACES.items():
        print(f"{alias}\t{namespace}")
    return 0


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()
    return run(args)


if __name__ == "__main__":
    raise SystemExit(main())
