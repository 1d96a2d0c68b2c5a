"""Tests for resourceful.errors — exception hierarchy and error messages."""

from resourceful.errors import ConfigurationError, DuplicateRouteIdError, ResourcefulError


class TestHierarchy:
    def test_configuration_error_is_resourceful_error(self) -> None:
        assert issubclass(ConfigurationError, ResourcefulError)

    def test_duplicate_id_is_configuration_error(self) -> None:
        assert issubclass(DuplicateRouteIdError, ConfigurationError)


class TestDuplicateRouteIdError:
    def test_ids_and_message(self) -> None:
        err = DuplicateRouteIdError(("users.index", "users.new"))
        assert err.ids == ("users.index", "users.new")
        assert str(err) == "Duplicate route ids: users.index, users.new"
