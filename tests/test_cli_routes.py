"""Tests for ``resourceful routes`` — route listing."""

import json

import pytest

from resourceful.cli import main


@pytest.mark.usefixtures("fake_routes_module")
class TestRoutesCommand:
    def test_table(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "_fake_route_config"])
        out = capsys.readouterr().out
        lines = out.splitlines()
        assert lines[0].split() == ["ID", "PATH", "FILE"]
        assert set(lines[1]) == {"-"}
        assert any(
            line.split()
            == [
                "users.comments.edit",
                "/users/:userId/comments/:commentId/edit",
                "./views/comments/edit.tsx",
            ]
            for line in lines
        )

    def test_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "_fake_route_config:build_routes", "--json"])
        data = json.loads(capsys.readouterr().out)
        assert data[0]["id"] == "posts.layout"
        assert data[0]["children"][0]["index"] is True

    def test_empty(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "_fake_route_config:empty"])
        assert capsys.readouterr().out == "No routes generated.\n"

    def test_resolution_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "_fake_route_config:not_routes"])
        assert exc_info.value.code == 1
        assert capsys.readouterr().err.startswith("Error: ")
