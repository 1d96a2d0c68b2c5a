"""RESTful resource route trees.

``crud()`` emits the route config a developer would otherwise write by
hand for one resource: a layout wrapping ``index``, ``new`` and a
per-instance group holding ``show``, ``edit`` and ``destroy``.  Nested
resources are declared in a children callback and attach to their
parent according to their ``on`` disposition::

    routes = [
        *crud("users", lambda: [
            crud("posts", {"on": "member"}),
            crud("comments", {"on": "shallow"}),
        ]),
    ]

Generated files follow ``{base}/{plural}/{view}{extension}``, e.g.
``./views/users/show.tsx``.
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import fields
from typing import Any, TypeAlias

from resourceful.config import CrudConfig
from resourceful.context import current_config, current_parent_id, scope
from resourceful.errors import ConfigurationError
from resourceful.ids import generate_id
from resourceful.inflect import instance_segment, plural
from resourceful.routes import index_route, prefix, route
from resourceful.shallow import rewrite_shallow
from resourceful.types import (
    ACTIONS,
    DISPOSITIONS,
    MEMBER_ACTIONS,
    ChildrenFunction,
    CrudOptions,
    RouteDescriptor,
)

logger = logging.getLogger("resourceful.crud")

CrudFunction: TypeAlias = Callable[..., list[RouteDescriptor]]

_OPTION_NAMES = frozenset(f.name for f in fields(CrudOptions))


def crud(
    resource: str,
    options: CrudOptions | Mapping[str, Any] | ChildrenFunction | None = None,
    children: ChildrenFunction | None = None,
) -> list[RouteDescriptor]:
    """Build the CRUD route tree for *resource*.

    Accepts four call shapes::

        crud("users")
        crud("users", {"only": ("index", "show")})
        crud("users", lambda: [crud("comments")])
        crud("users", CrudOptions(id_prefix="admin"), lambda: [crud("comments")])

    Args:
        resource: Resource name, used for paths, view directories and ids.
        options: ``CrudOptions``, a mapping of the same fields, or the
            children callback when no options are needed.
        children: Zero-argument callable returning nested routes, either
            flat or as a list of ``crud()`` results.

    Returns:
        The resource's layout route, followed by any top-level trees
        produced by shallow children.

    Raises:
        ConfigurationError: If the resource name or options are invalid,
            or the children callback returns something other than routes.
    """
    opts, produce = _normalize(resource, options, children)

    config = current_config()
    parent_id = current_parent_id()
    name = plural(resource)
    scope_id = generate_id(resource, opts.id_prefix, None, parent_id)

    with scope(parent_id=scope_id):
        nested = _flatten(resource, produce())

    def build(action: str, path: str | None = None) -> RouteDescriptor:
        route_id = generate_id(resource, opts.id_prefix, action, parent_id)
        file = config.view(name, action)
        if path is None:
            return index_route(file, id=route_id, on=opts.on, resource=resource, action=action)
        return route(path, file, id=route_id, on=opts.on, resource=resource, action=action)

    routes: list[RouteDescriptor] = []
    if "index" in opts.only:
        routes.append(build("index"))
    if "new" in opts.only:
        routes.append(build("new", "new"))

    if MEMBER_ACTIONS.intersection(opts.only):
        member: list[RouteDescriptor] = []
        if "show" in opts.only:
            member.append(build("show"))
        if "edit" in opts.only:
            member.append(build("edit", "edit"))
        if "destroy" in opts.only:
            member.append(build("destroy", "destroy"))
        member.extend(child for child in nested if child.on == "member")
        routes.extend(prefix(instance_segment(resource), member))

    routes.extend(child for child in nested if child.on is None or child.on == "collection")

    # A nested non-shallow resource keeps its shallow children's index/new
    # groups beside its own root so the enclosing resource places them too
    attached_here = bool(parent_id) and opts.on != "shallow"
    extra = rewrite_shallow(
        (child for child in nested if child.on == "shallow"),
        resource=resource,
        id_prefix=opts.id_prefix,
        scope_id=scope_id,
        config=config,
        nested_on=opts.on if attached_here else "shallow",
    )

    root = route(
        name,
        config.view(name, "_layout"),
        id=generate_id(resource, opts.id_prefix, "layout", parent_id),
        on=opts.on,
        children=routes,
        resource=resource,
        action="layout",
    )
    logger.debug("Built %r under %r with %d nested routes", resource, parent_id, len(nested))
    return [root, *extra]


def create_bound_crud(base: str | CrudConfig) -> CrudFunction:
    """Return a ``crud`` whose routes point at view files under *base*.

    Nested plain ``crud()`` calls made inside the bound call's children
    callback inherit the same base::

        admin_crud = create_bound_crud("./views/admin")
        routes = admin_crud("users", lambda: [crud("comments")])
    """
    config = base if isinstance(base, CrudConfig) else CrudConfig(base=base)

    def bound_crud(
        resource: str,
        options: CrudOptions | Mapping[str, Any] | ChildrenFunction | None = None,
        children: ChildrenFunction | None = None,
    ) -> list[RouteDescriptor]:
        with scope(config=config):
            return crud(resource, options, children)

    bound_crud.__doc__ = crud.__doc__
    return bound_crud


def _no_children() -> list[RouteDescriptor]:
    return []


def _normalize(
    resource: str,
    options: CrudOptions | Mapping[str, Any] | ChildrenFunction | None,
    children: ChildrenFunction | None,
) -> tuple[CrudOptions, ChildrenFunction]:
    """Fold the four call shapes into ``(options, children)``."""
    if not isinstance(resource, str) or not resource:
        msg = f"Resource name must be a non-empty string, got {resource!r}"
        raise ConfigurationError(msg)

    if callable(options) and not isinstance(options, CrudOptions):
        if children is not None:
            msg = f"crud({resource!r}) got two children callbacks"
            raise ConfigurationError(msg)
        children, options = options, None

    if options is None:
        opts = CrudOptions()
    elif isinstance(options, CrudOptions):
        opts = options
    elif isinstance(options, Mapping):
        opts = _options_from_mapping(resource, options)
    else:
        msg = (
            f"crud({resource!r}) options must be CrudOptions, a mapping, or a callable, "
            f"not {type(options).__name__}"
        )
        raise ConfigurationError(msg)

    _validate(resource, opts)
    return opts, children if children is not None else _no_children


def _options_from_mapping(resource: str, options: Mapping[str, Any]) -> CrudOptions:
    unknown = sorted(set(options) - _OPTION_NAMES)
    if unknown:
        msg = f"crud({resource!r}) got unknown options: {', '.join(unknown)}"
        raise ConfigurationError(msg)
    values = dict(options)
    if "only" in values and values["only"] is not None:
        values["only"] = tuple(values["only"])
    elif "only" in values:
        del values["only"]
    return CrudOptions(**values)


def _validate(resource: str, opts: CrudOptions) -> None:
    if isinstance(opts.only, str):
        msg = f"crud({resource!r}) 'only' must be a sequence of actions, not a string"
        raise ConfigurationError(msg)
    if not isinstance(opts.only, Iterable):
        msg = (
            f"crud({resource!r}) 'only' must be a sequence of actions, "
            f"not {type(opts.only).__name__}"
        )
        raise ConfigurationError(msg)
    invalid = [action for action in opts.only if action not in ACTIONS]
    if invalid:
        msg = (
            f"crud({resource!r}) got unknown actions {invalid!r}; "
            f"expected any of {', '.join(ACTIONS)}"
        )
        raise ConfigurationError(msg)
    if opts.on is not None and opts.on not in DISPOSITIONS:
        msg = (
            f"crud({resource!r}) got disposition {opts.on!r}; "
            f"expected one of {', '.join(DISPOSITIONS)}"
        )
        raise ConfigurationError(msg)


def _flatten(resource: str, produced: Any) -> list[RouteDescriptor]:
    """Flatten a children callback's result by exactly one level."""
    if not isinstance(produced, Iterable) or isinstance(produced, str):
        msg = (
            f"Children callback of {resource!r} must return a list of routes, "
            f"got {type(produced).__name__}"
        )
        raise ConfigurationError(msg)
    flat: list[RouteDescriptor] = []
    for item in produced:
        if isinstance(item, RouteDescriptor):
            flat.append(item)
        elif isinstance(item, Iterable) and not isinstance(item, str):
            flat.extend(item)
        else:
            flat.append(item)
    for item in flat:
        if not isinstance(item, RouteDescriptor):
            msg = (
                f"Children of {resource!r} must be routes or lists of routes, "
                f"got {type(item).__name__}"
            )
            raise ConfigurationError(msg)
    return flat
