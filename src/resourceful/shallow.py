"""Shallow nesting rewrite.

A resource nested with ``on="shallow"`` keeps its collection actions
(``index`` and ``new``) one level under the parent's instance segment,
while its member actions (``show``, ``edit``, ``destroy``) move to a
standalone top-level tree addressed by the child's own instance id::

    crud("users", lambda: [crud("posts", {"on": "shallow"})])

    /users/:userId/posts          users.posts.index
    /users/:userId/posts/new      users.posts.new
    /posts/:postId                posts.show
    /posts/:postId/edit           posts.edit
    /posts/:postId/destroy        posts.destroy

Grouping uses the ``resource`` and ``action`` fields each generated
route carries, not the text of its id.
"""

import logging
from collections.abc import Iterable
from dataclasses import replace

from resourceful.config import CrudConfig
from resourceful.ids import generate_id
from resourceful.inflect import instance_segment, plural
from resourceful.routes import layout, prefix, route
from resourceful.types import NESTED_SHALLOW_ACTIONS, Disposition, RouteDescriptor

logger = logging.getLogger("resourceful.shallow")


def rewrite_shallow(
    shallow_routes: Iterable[RouteDescriptor],
    *,
    resource: str,
    id_prefix: str | None,
    scope_id: str,
    config: CrudConfig,
    nested_on: Disposition | None = "shallow",
) -> list[RouteDescriptor]:
    """Regroup shallow children of *resource* into extra top-level trees.

    Args:
        shallow_routes: Nested routes of *resource* tagged ``on="shallow"``.
        resource: The enclosing resource name.
        id_prefix: The enclosing resource's id prefix.
        scope_id: The enclosing resource's own id (the parent id its
            children were built under).  Stripped from relocated ids.
        config: Config used for the synthesized layout files.
        nested_on: Disposition the nested groups carry.  ``"shallow"``
            hoists them to the top level; anything else leaves them for
            the enclosing resource to attach like its own root route.

    Returns:
        Nested ``index``/``new`` groups prefixed with the enclosing
        resource's instance path, then one standalone tree per relocated
        resource in first-seen order, then any trees an inner shallow
        rewrite already hoisted.
    """
    nested: dict[str, list[RouteDescriptor]] = {}
    relocated: dict[str, list[RouteDescriptor]] = {}
    hoisted: list[RouteDescriptor] = []

    for child in shallow_routes:
        if child.hoisted:
            hoisted.append(child)
            continue
        name = child.resource
        if name is None:
            logger.warning(
                "Skipping shallow route %r under %r: no originating resource",
                child.id or child.file,
                resource,
            )
            continue
        for leaf in child.children or ():
            if leaf.action in NESTED_SHALLOW_ACTIONS:
                nested.setdefault(name, []).append(leaf)
            else:
                relocated.setdefault(name, []).append(_strip_scope(leaf, scope_id))

    groups = [
        route(
            plural(name),
            config.view(plural(name), "_layout"),
            id=generate_id(name, id_prefix, "layout", resource),
            on=nested_on,
            children=leaves,
            resource=name,
            action="layout",
        )
        for name, leaves in nested.items()
    ]
    if nested_on == "shallow":
        groups = [_hoist(group) for group in groups]
    # Relative to wherever the enclosing resource itself is attached
    result = prefix(f"{plural(resource)}/{instance_segment(resource)}", groups)

    for name, leaves in relocated.items():
        result.append(
            _hoist(
                layout(
                    config.view(plural(name), "_layout"),
                    id=generate_id(name, id_prefix, "layout"),
                    on="shallow",
                    children=prefix(plural(name), leaves),
                    resource=name,
                    action="layout",
                )
            )
        )

    if result or hoisted:
        logger.debug(
            "Shallow rewrite of %r: %d nested, %d relocated, %d passed through",
            resource,
            len(nested),
            len(relocated),
            len(hoisted),
        )
    return [*result, *hoisted]


def _hoist(entry: RouteDescriptor) -> RouteDescriptor:
    return replace(entry, hoisted=True)


def _strip_scope(entry: RouteDescriptor, scope_id: str) -> RouteDescriptor:
    """Drop the enclosing resource's id from *entry* and its descendants.

    ``users.posts.show`` under scope ``users`` becomes ``posts.show``.
    Ids outside the scope are left alone.
    """
    new_id = entry.id
    if new_id is not None and new_id.startswith(f"{scope_id}."):
        new_id = new_id[len(scope_id) + 1 :]
    children = entry.children
    if children is not None:
        children = tuple(_strip_scope(child, scope_id) for child in children)
    return replace(entry, id=new_id, children=children)
