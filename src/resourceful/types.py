"""Data models for generated route trees.

Immutable frozen dataclasses representing route-config entries and the
options a ``crud()`` call accepts.  Built once when a route module is
evaluated.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Literal, TypeAlias

Disposition: TypeAlias = Literal["member", "collection", "shallow"]
Action: TypeAlias = Literal["index", "new", "show", "edit", "destroy"]

DISPOSITIONS: tuple[Disposition, ...] = ("member", "collection", "shallow")
ACTIONS: tuple[Action, ...] = ("index", "show", "new", "edit", "destroy")

# Actions addressed through the per-instance ``:{name}Id`` segment
MEMBER_ACTIONS: frozenset[str] = frozenset({"show", "edit", "destroy"})

# Actions a shallow child keeps nested under its parent's instance segment
NESTED_SHALLOW_ACTIONS: frozenset[str] = frozenset({"index", "new"})


@dataclass(frozen=True, slots=True)
class RouteDescriptor:
    """A single entry of a file-based router's route config.

    Attributes:
        file: View file rendered for this route.
        path: URL path segment, ``None`` for index and layout routes.
        id: Dot-delimited route id, unique within one generated tree.
        index: ``True`` for index routes (render at the parent's path).
        case_sensitive: Router case-sensitivity flag, passed through.
        on: How this route attaches to an enclosing resource.
        children: Nested routes, ``None`` for leaves.
        resource: Name of the resource whose ``crud()`` produced this route.
        action: The action (or ``"layout"``) this route renders.
        hoisted: Already placed at the top level by a shallow rewrite;
            enclosing resources pass it through unchanged.
    """

    file: str
    path: str | None = None
    id: str | None = None
    index: bool = False
    case_sensitive: bool | None = None
    on: Disposition | None = None
    children: tuple["RouteDescriptor", ...] | None = None
    resource: str | None = field(default=None, compare=False)
    action: str | None = field(default=None, compare=False)
    hoisted: bool = field(default=False, compare=False)


@dataclass(frozen=True, slots=True)
class CrudOptions:
    """Options for one ``crud()`` call.

    Attributes:
        id_prefix: Inserted into generated ids only, never into paths.
        only: Actions to generate. Order does not affect output order.
        on: Disposition this resource's routes carry when nested.
        shallow: Reserved. Shallow nesting is requested with ``on="shallow"``.
    """

    id_prefix: str | None = None
    only: tuple[Action, ...] = ACTIONS
    on: Disposition | None = None
    shallow: bool | None = None


RouteList: TypeAlias = list[RouteDescriptor]
ChildrenFunction: TypeAlias = Callable[[], Sequence[RouteDescriptor | Sequence[RouteDescriptor]]]
