"""Resourceful — RESTful CRUD route trees for file-based routers.

Generates the nested route config a developer would otherwise write by
hand for a resource: index/new/show/edit/destroy views, member and
collection sub-resources, and shallow nesting.

Basic usage::

    from resourceful import crud

    routes = [
        *crud("users", lambda: [
            crud("comments", {"on": "member"}),
            crud("posts", {"on": "shallow"}),
        ]),
    ]

Views under another directory::

    from resourceful import create_bound_crud

    admin = create_bound_crud("./views/admin")
    routes = admin("users", {"id_prefix": "admin"})
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "CrudConfig",
    "CrudOptions",
    "DuplicateRouteIdError",
    "ResourcefulError",
    "RouteDescriptor",
    "create_bound_crud",
    "crud",
    "ensure_unique_ids",
    "find_duplicate_ids",
    "index_route",
    "layout",
    "prefix",
    "route",
    "to_json",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import resourceful`` fast while providing a clean top-level API.
    """
    if name in ("crud", "create_bound_crud"):
        from resourceful import builder as _builder

        return getattr(_builder, name)

    if name == "CrudConfig":
        from resourceful.config import CrudConfig

        return CrudConfig

    if name in ("CrudOptions", "RouteDescriptor"):
        from resourceful import types as _types

        return getattr(_types, name)

    if name in ("index_route", "layout", "prefix", "route"):
        from resourceful import routes as _routes

        return getattr(_routes, name)

    if name in ("ensure_unique_ids", "find_duplicate_ids"):
        from resourceful import ids as _ids

        return getattr(_ids, name)

    if name == "to_json":
        from resourceful.serialize import to_json

        return to_json

    if name in ("ResourcefulError", "ConfigurationError", "DuplicateRouteIdError"):
        from resourceful import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
