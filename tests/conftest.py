"""Shared fixtures for resourceful tests."""

import sys
import types

import pytest

from resourceful.builder import crud


@pytest.fixture
def fake_routes_module(monkeypatch: pytest.MonkeyPatch) -> types.ModuleType:
    """Register a fake route module on sys.modules."""
    mod = types.ModuleType("_fake_route_config")
    mod.routes = crud("users", lambda: [crud("comments", {"on": "member"})])  # type: ignore[attr-defined]
    mod.build_routes = lambda: crud("posts", {"only": ["index"]})  # type: ignore[attr-defined]
    mod.duplicated = [*crud("users"), *crud("users")]  # type: ignore[attr-defined]
    mod.not_routes = "just a string"  # type: ignore[attr-defined]
    mod.empty = []  # type: ignore[attr-defined]

    def broken() -> list:
        raise RuntimeError("boom")

    mod.broken = broken  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "_fake_route_config", mod)
    return mod
