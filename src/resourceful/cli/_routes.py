"""``resourceful routes`` — list generated routes.

Resolves an import string to a route list and prints every route with
its id, full path, and view file, or the whole config as JSON.
"""

import argparse
import sys

from resourceful.cli._resolve import resolve_routes
from resourceful.serialize import flatten_paths, to_json


def run_routes(args: argparse.Namespace) -> None:
    """Print the routes found at ``args.target``.

    With ``--json`` the route config is printed verbatim, otherwise a
    table of ID, PATH, and FILE with one row per route.
    """
    try:
        routes = resolve_routes(args.target)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if args.json:
        print(to_json(routes))
        return

    if not routes:
        print("No routes generated.")
        return

    rows: list[tuple[str, str, str]] = [
        (entry.id or "-", path, entry.file) for path, entry in flatten_paths(routes)
    ]

    max_id = max(max(len(r[0]) for r in rows), 2)  # "ID" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:<{max_id}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("ID", "PATH", "FILE"))
    sep_len = max_id + max_path + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for route_id, path, file in rows:
        print(fmt.format(route_id, path, file))
