"""``resourceful check`` — route id uniqueness check.

Resolves an import string to a route list and verifies no route id is
used twice.  Exits with code 1 if duplicates are found.
"""

import argparse
import sys

from resourceful.cli._resolve import resolve_routes
from resourceful.errors import DuplicateRouteIdError
from resourceful.ids import ensure_unique_ids
from resourceful.routes import walk


def run_check(args: argparse.Namespace) -> None:
    """Check the routes found at ``args.target`` for duplicate ids."""
    try:
        routes = resolve_routes(args.target)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    try:
        ensure_unique_ids(routes)
    except DuplicateRouteIdError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    count = sum(1 for _ in walk(routes))
    print(f"OK: {count} routes, all ids unique.")
