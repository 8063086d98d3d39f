"""Locator CLI — inspect and query locators from the command line.

Entry point registered as ``locator`` in ``pyproject.toml``::

    [project.scripts]
    locator = "locator.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``locator`` command."""
    parser = argparse.ArgumentParser(
        prog="locator",
        description="Locator — layered (domain, address) action registry.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log layer filtering decisions to stderr",
    )
    subparsers = parser.add_subparsers(dest="command")

    layers_help = (
        "Comma-separated active layers, used when the target must be built "
        "(defaults to LOCATOR_ACTIVE_LAYERS)"
    )

    # -- locator locations ------------------------------------------------
    locations_parser = subparsers.add_parser("locations", help="List registered locations")
    locations_parser.add_argument(
        "target",
        help="Import string (e.g. myapp:locator)",
    )
    locations_parser.add_argument("--layers", default=None, help=layers_help)

    # -- locator locate ---------------------------------------------------
    locate_parser = subparsers.add_parser("locate", help="Resolve one location")
    locate_parser.add_argument(
        "target",
        help="Import string (e.g. myapp:locator)",
    )
    locate_parser.add_argument("domain", help="Domain name")
    locate_parser.add_argument("address", help="Address within the domain")
    locate_parser.add_argument("--layers", default=None, help=layers_help)

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "locations":
        from locator.cli._locations import run_locations

        run_locations(args)
    elif args.command == "locate":
        from locator.cli._locate import run_locate

        run_locate(args)
