"""``locator locate`` — resolve a single location.

Prints the located action, or the miss message and exits with code 1.
"""

import argparse
import sys

from locator.cli._resolve import resolve_locator
from locator.result import Err, Ok


def run_locate(args: argparse.Namespace) -> None:
    try:
        locator = resolve_locator(args.target, args.layers)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    match locator.locate(args.domain, args.address):
        case Ok(action):
            print(f"{args.domain}:{args.address} -> {action.name}")
        case Err(failure):
            print(failure.message, file=sys.stderr)
            raise SystemExit(1)
