"""Route import resolution — resolves ``"module:attribute"`` strings to route lists.

Shared utility used by ``resourceful routes`` and ``resourceful check``
to locate a route config from a user-supplied import string.
"""

import importlib

from resourceful.types import RouteDescriptor


def resolve_routes(import_string: str) -> list[RouteDescriptor]:
    """Resolve an import string to a list of generated routes.

    Accepts ``"module:attribute"`` format.  When the attribute portion
    is omitted, defaults to ``"routes"`` (e.g. ``"app.config"`` resolves
    to ``app.config.routes``).

    Supports factory functions: if the resolved object is callable, it
    is called with no arguments and its result is used.

    Args:
        import_string: Dotted module path with optional ``:attribute``
            suffix (e.g. ``"app.routes"``, ``"app.routes:build_routes"``).

    Returns:
        The resolved routes.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a sequence of routes.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "routes"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, (list, tuple)) or not all(
        isinstance(entry, RouteDescriptor) for entry in obj
    ):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a list of routes"
        raise TypeError(msg)

    return list(obj)
