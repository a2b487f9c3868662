"""Linkroute CLI — inspect and try out route tables.

Entry point registered as ``linkroute`` in ``pyproject.toml``::

    [project.scripts]
    linkroute = "linkroute.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``linkroute`` command."""
    parser = argparse.ArgumentParser(
        prog="linkroute",
        description="Linkroute — deep-link URL routing.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- linkroute routes -------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument(
        "target",
        help="Import string of a Router or RouteRegistry (e.g. myapp.links:registry)",
    )

    # -- linkroute match --------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Show the parameters a URL would receive")
    match_parser.add_argument(
        "target",
        help="Import string of a Router or RouteRegistry (e.g. myapp.links:registry)",
    )
    match_parser.add_argument("url", help="URL to match (e.g. app://user/42?tab=bio)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from linkroute.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from linkroute.cli._match import run_match

        run_match(args)
