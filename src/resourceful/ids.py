"""Route id generation and uniqueness checks.

Ids are dot-delimited and mirror the nesting of resource and action
names: ``users.comments.edit``.  They double as the router's route keys.
"""

from collections.abc import Iterable

from resourceful.errors import DuplicateRouteIdError
from resourceful.routes import walk
from resourceful.types import RouteDescriptor


def generate_id(
    resource: str,
    id_prefix: str | None = None,
    action: str | None = None,
    parent_id: str | None = None,
) -> str:
    """Compose a route id from its parts, skipping the empty ones.

    Examples::

        generate_id("users")                              -> "users"
        generate_id("users", "admin", "edit")             -> "admin.users.edit"
        generate_id("comments", None, "index", "users")   -> "users.comments.index"
    """
    parts: list[str] = []
    if parent_id:
        parts.append(parent_id)
    if id_prefix:
        parts.append(id_prefix)
    parts.append(resource)
    if action:
        parts.append(action)
    return ".".join(parts)


def find_duplicate_ids(routes: Iterable[RouteDescriptor]) -> tuple[str, ...]:
    """Return ids that appear more than once in *routes*, in first-seen order."""
    seen: set[str] = set()
    duplicates: dict[str, None] = {}
    for _depth, entry in walk(routes):
        if entry.id is None:
            continue
        if entry.id in seen:
            duplicates[entry.id] = None
        else:
            seen.add(entry.id)
    return tuple(duplicates)


def ensure_unique_ids(routes: Iterable[RouteDescriptor]) -> None:
    """Raise ``DuplicateRouteIdError`` if any route id occurs twice.

    ``crud()`` never checks this itself: distinct ``(parent, prefix,
    resource)`` combinations per call site are the caller's job.
    """
    duplicates = find_duplicate_ids(routes)
    if duplicates:
        raise DuplicateRouteIdError(duplicates)
