"""Resourceful exception hierarchy.

Shared across the builder, the shallow rewriter, and the CLI so every
module raises and catches the same types.
"""


class ResourcefulError(Exception):
    """Base for all resourceful-specific errors."""


class ConfigurationError(ResourcefulError):
    """Raised when a ``crud()`` call is given options it cannot honour.

    Raised at the entry point, before any part of the tree is built.
    """


class DuplicateRouteIdError(ConfigurationError):
    """A generated route tree contains the same route id more than once.

    Route ids double as the router's unique route keys, so a collision
    silently shadows one of the routes.
    """

    def __init__(self, ids: tuple[str, ...]) -> None:
        self.ids = ids
        super().__init__(f"Duplicate route ids: {', '.join(ids)}")
