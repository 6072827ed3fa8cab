from __future__ import annotations

import argparse
import sys

from nameid.cli import derive, namespaces

COMMANDS = {
    "derive": derive.main,
    "namespaces": namespaces.main,
}


def main() -> int:
    parser = argparse.ArgumentParser(description="Deterministic name-based UUID CLI")
    parser.add_argument("command", choices=sorted(COMMANDS), help="Command to execute")
    args, remaining = parser.parse_known_args()

    sys.argv = [args.command, *remaining]
    return COMMANDS[args.command]()


if __name__ == "__main__":
    raise SystemExit(main())
