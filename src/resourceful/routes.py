"""Route-config primitives.

Constructors for the four entry shapes a file-based router understands:
index routes, path routes, pathless layouts, and path prefixes.  The
``on`` disposition and the ``resource``/``action`` origin fields are
threaded through unchanged.
"""

from collections.abc import Iterable, Iterator
from dataclasses import replace

from resourceful.types import Disposition, RouteDescriptor


def index_route(
    file: str,
    *,
    id: str | None = None,  # noqa: A002
    on: Disposition | None = None,
    resource: str | None = None,
    action: str | None = None,
) -> RouteDescriptor:
    """Create an index route, rendered at its parent's path."""
    return RouteDescriptor(
        file=file,
        id=id,
        index=True,
        on=on,
        resource=resource,
        action=action,
    )


def route(
    path: str,
    file: str,
    *,
    id: str | None = None,  # noqa: A002
    on: Disposition | None = None,
    case_sensitive: bool | None = None,
    children: Iterable[RouteDescriptor] | None = None,
    resource: str | None = None,
    action: str | None = None,
) -> RouteDescriptor:
    """Create a route matching *path* relative to its parent."""
    return RouteDescriptor(
        file=file,
        path=path,
        id=id,
        case_sensitive=case_sensitive,
        on=on,
        children=tuple(children) if children is not None else None,
        resource=resource,
        action=action,
    )


def layout(
    file: str,
    *,
    id: str | None = None,  # noqa: A002
    on: Disposition | None = None,
    children: Iterable[RouteDescriptor] | None = None,
    resource: str | None = None,
    action: str | None = None,
) -> RouteDescriptor:
    """Create a pathless layout route wrapping *children*."""
    return RouteDescriptor(
        file=file,
        id=id,
        on=on,
        children=tuple(children) if children is not None else None,
        resource=resource,
        action=action,
    )


def prefix(prefix_path: str, routes: Iterable[RouteDescriptor]) -> list[RouteDescriptor]:
    """Prefix every route in *routes* with *prefix_path*.

    Routes with a path get the prefix joined in front of it; index
    routes take the prefix as their path.  Pathless layouts are kept as
    they are and the prefix is pushed into their children::

        prefix(":userId", [index_route("show.tsx"), route("edit", "edit.tsx")])
        # -> index at ":userId", route at ":userId/edit"
    """
    prefixed: list[RouteDescriptor] = []
    for entry in routes:
        if entry.index or entry.path is not None:
            path = join_paths(prefix_path, entry.path) if entry.path else prefix_path
            prefixed.append(replace(entry, path=path))
        elif entry.children is not None:
            prefixed.append(replace(entry, children=tuple(prefix(prefix_path, entry.children))))
        else:
            prefixed.append(entry)
    return prefixed


def join_paths(left: str, right: str) -> str:
    """Join two path fragments with exactly one slash between them."""
    return f"{left.rstrip('/')}/{right.lstrip('/')}"


def walk(routes: Iterable[RouteDescriptor], depth: int = 0) -> Iterator[tuple[int, RouteDescriptor]]:
    """Yield ``(depth, route)`` for every route in document order."""
    for entry in routes:
        yield depth, entry
        if entry.children:
            yield from walk(entry.children, depth + 1)
