"""Tests for ``resourceful check`` — route id uniqueness."""

import pytest

from resourceful.cli import main


@pytest.mark.usefixtures("fake_routes_module")
class TestCheckCommand:
    def test_unique(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["check", "_fake_route_config"])
        assert capsys.readouterr().out == "OK: 12 routes, all ids unique.\n"

    def test_duplicates_exit_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["check", "_fake_route_config:duplicated"])
        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert err.startswith("Error: Duplicate route ids: users.layout, users.index")

    def test_missing_module(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["check", "nonexistent_module_xyz"])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err
