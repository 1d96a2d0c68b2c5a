"""Resourceful CLI — inspect and check generated route trees.

Entry point registered as ``resourceful`` in ``pyproject.toml``::

    [project.scripts]
    resourceful = "resourceful.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``resourceful`` command."""
    parser = argparse.ArgumentParser(
        prog="resourceful",
        description="Resourceful — RESTful CRUD route trees for file-based routers.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- resourceful routes -----------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List generated routes")
    routes_parser.add_argument(
        "target",
        help="Import string (e.g. app.routes:routes)",
    )
    routes_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the route config as JSON instead of a table",
    )

    # -- resourceful check ------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Check route ids are unique")
    check_parser.add_argument(
        "target",
        help="Import string (e.g. app.routes:routes)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from resourceful.cli._routes import run_routes

        run_routes(args)
    elif args.command == "check":
        from resourceful.cli._check import run_check

        run_check(args)
