"""Ambient build context via ContextVar.

Provides the two values a nested ``crud()`` call inherits from the call
that encloses it:

- the active ``CrudConfig`` (base directory for view files)
- the parent route id that prefixes nested ids

Both are bound by ``scope()`` for the dynamic extent of a children
callback and reset on exit, including when the callback raises.

Thread safety:
    ``ContextVar`` is task-local under asyncio and thread-local under
    threads, so independent top-level builds never see each other's
    context. No locks needed.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from resourceful.config import DEFAULT_CONFIG, CrudConfig

config_var: ContextVar[CrudConfig] = ContextVar("resourceful_config", default=DEFAULT_CONFIG)
"""Config of the innermost bound builder. Defaults outside any binding."""

parent_id_var: ContextVar[str] = ContextVar("resourceful_parent_id", default="")
"""Route id of the resource whose children callback is running."""


def current_config() -> CrudConfig:
    """Return the active builder config."""
    return config_var.get()


def current_parent_id() -> str:
    """Return the enclosing resource's id, or ``""`` at the top level."""
    return parent_id_var.get()


@contextmanager
def scope(
    *,
    config: CrudConfig | None = None,
    parent_id: str | None = None,
) -> Iterator[None]:
    """Bind *config* and/or *parent_id* for the duration of the block.

    Values left as ``None`` are inherited from the enclosing scope::

        with scope(parent_id="users"):
            crud("comments")  # ids start with "users."
    """
    config_token = config_var.set(config) if config is not None else None
    parent_token = parent_id_var.set(parent_id) if parent_id is not None else None
    try:
        yield
    finally:
        if parent_token is not None:
            parent_id_var.reset(parent_token)
        if config_token is not None:
            config_var.reset(config_token)
