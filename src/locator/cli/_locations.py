"""``locator locations`` — list registered locations.

Resolves an import string to a locator and prints every reachable
location with its action.
"""

import argparse
import sys

from locator.cli._resolve import resolve_locator


def run_locations(args: argparse.Namespace) -> None:
    """Print a DOMAIN / ADDRESS / ACTION table for a locator."""
    try:
        locator = resolve_locator(args.target, args.layers)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    locations = locator.locations
    if not locations:
        print("No locations registered.")
        return

    rows = [(domain, address, action.name) for domain, address, action in locations]

    max_domain = max(max(len(r[0]) for r in rows), 6)  # "DOMAIN" header
    max_address = max(max(len(r[1]) for r in rows), 7)  # "ADDRESS" header

    fmt = f"{{:<{max_domain}}}  {{:<{max_address}}}  {{}}"
    print(fmt.format("DOMAIN", "ADDRESS", "ACTION"))
    sep_len = max_domain + max_address + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for domain, address, name in rows:
        print(fmt.format(domain, address, name))

    if locator.excluded:
        print(f"\nExcluded domains: {', '.join(locator.excluded)}")
