"""Tests for resourceful.ids — id generation and uniqueness checks."""

import pytest

from resourceful.builder import crud
from resourceful.errors import DuplicateRouteIdError
from resourceful.ids import ensure_unique_ids, find_duplicate_ids, generate_id
from resourceful.routes import index_route, route


class TestGenerateId:
    def test_resource_only(self) -> None:
        assert generate_id("users") == "users"

    def test_with_action(self) -> None:
        assert generate_id("users", None, "index") == "users.index"

    def test_with_prefix(self) -> None:
        assert generate_id("users", "admin", "edit") == "admin.users.edit"

    def test_with_parent(self) -> None:
        assert generate_id("comments", None, "show", "users") == "users.comments.show"

    def test_all_parts_in_order(self) -> None:
        assert generate_id("comments", "admin", "new", "org.users") == "org.users.admin.comments.new"

    def test_empty_parts_skipped(self) -> None:
        assert generate_id("users", "", "", "") == "users"


class TestDuplicates:
    def test_generated_tree_is_unique(self) -> None:
        routes = crud("users", lambda: [crud("posts", {"on": "shallow"}), crud("comments")])
        assert find_duplicate_ids(routes) == ()
        ensure_unique_ids(routes)

    def test_sibling_resources_with_same_name(self) -> None:
        routes = crud("users", lambda: [crud("comments"), crud("comments", {"on": "member"})])
        duplicates = find_duplicate_ids(routes)
        assert duplicates[0] == "users.comments.layout"
        assert "users.comments.destroy" in duplicates

    def test_distinct_prefixes_avoid_collision(self) -> None:
        routes = crud(
            "users",
            lambda: [crud("comments"), crud("comments", {"on": "member", "id_prefix": "own"})],
        )
        assert find_duplicate_ids(routes) == ()

    def test_ensure_raises(self) -> None:
        routes = [
            index_route("./a.tsx", id="a"),
            route("b", "./b.tsx", id="a", children=[index_route("./c.tsx", id="c")]),
            index_route("./c.tsx", id="c"),
        ]
        with pytest.raises(DuplicateRouteIdError) as exc_info:
            ensure_unique_ids(routes)
        assert exc_info.value.ids == ("a", "c")
        assert str(exc_info.value) == "Duplicate route ids: a, c"

    def test_routes_without_ids_ignored(self) -> None:
        assert find_duplicate_ids([index_route("./a.tsx"), index_route("./a.tsx")]) == ()
