"""Tests for resourceful.inflect — resource name derivation."""

import pytest

from resourceful.inflect import camel_singular, instance_segment, plural


class TestPlural:
    @pytest.mark.parametrize(
        ("word", "expected"),
        [("user", "users"), ("users", "users"), ("person", "people"), ("category", "categories")],
    )
    def test_plural(self, word: str, expected: str) -> None:
        assert plural(word) == expected


class TestCamelSingular:
    @pytest.mark.parametrize(
        ("word", "expected"),
        [("users", "user"), ("blog_posts", "blogPost"), ("people", "person"), ("user", "user")],
    )
    def test_camel_singular(self, word: str, expected: str) -> None:
        assert camel_singular(word) == expected


class TestInstanceSegment:
    def test_segment(self) -> None:
        assert instance_segment("comments") == ":commentId"
        assert instance_segment("line_items") == ":lineItemId"
