"""Route config rendering.

Converts generated descriptors into the plain JSON route config a
file-based router loads, and into flat rows for terminal listings.
"""

import json
from collections.abc import Iterable, Iterator
from typing import Any

from resourceful.routes import join_paths
from resourceful.types import RouteDescriptor


def to_dict(entry: RouteDescriptor) -> dict[str, Any]:
    """Render *entry* as a route-config mapping, omitting unset keys."""
    data: dict[str, Any] = {}
    if entry.id is not None:
        data["id"] = entry.id
    if entry.path is not None:
        data["path"] = entry.path
    data["file"] = entry.file
    if entry.index:
        data["index"] = True
    if entry.case_sensitive is not None:
        data["caseSensitive"] = entry.case_sensitive
    if entry.on is not None:
        data["on"] = entry.on
    if entry.children is not None:
        data["children"] = [to_dict(child) for child in entry.children]
    return data


def to_json(routes: Iterable[RouteDescriptor], *, indent: int | None = 2) -> str:
    """Render *routes* as a JSON array."""
    return json.dumps([to_dict(entry) for entry in routes], indent=indent)


def flatten_paths(
    routes: Iterable[RouteDescriptor],
    parent_path: str = "",
) -> Iterator[tuple[str, RouteDescriptor]]:
    """Yield ``(full_path, route)`` for every route, depth-first.

    Full paths are absolute and joined through every ancestor::

        ("/users/:userId/edit", <users.edit>)
    """
    for entry in routes:
        if entry.path:
            full = join_paths(parent_path, entry.path)
        else:
            full = parent_path or "/"
        if not full.startswith("/"):
            full = "/" + full
        yield full, entry
        if entry.children:
            yield from flatten_paths(entry.children, full)
