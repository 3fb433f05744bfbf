"""Tests for the command line interface."""

from __future__ import annotations

import json
import sys

import pytest

from luau_props_lsp.__main__ import main
from luau_props_lsp._complete import load_props_file, run_complete

code_luau = """\
local e = React.createElement

return e("Frame", {

})
"""


@pytest.fixture
def luau_file(tmp_path):
    path = tmp_path / "ui.luau"
    path.write_text(code_luau)
    return path


class TestRunComplete:
    def test_prints_one_candidate_per_line(self, luau_file, capsys):
        run_complete(str(luau_file), 4, 1)
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "BackgroundColor3\tFrame property (React Luau helper)"
        assert lines[-1].startswith("AutomaticSize\t")

    def test_no_candidates_outside_table(self, luau_file, capsys):
        run_complete(str(luau_file), 1, 1)
        assert capsys.readouterr().out == ""

    def test_props_file(self, luau_file, tmp_path, capsys):
        props_path = tmp_path / "props.json"
        props_path.write_text(json.dumps({"Frame": ["Size", "Position"]}))
        run_complete(str(luau_file), 4, 1, str(props_path))
        assert capsys.readouterr().out.splitlines() == [
            "Size\tFrame property (React Luau helper)",
            "Position\tFrame property (React Luau helper)",
        ]

    def test_missing_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            run_complete(str(tmp_path / "missing.luau"), 1, 1)
        assert exc_info.value.code == 1
        assert "Error reading" in capsys.readouterr().err


class TestLoadPropsFile:
    def test_invalid_json(self, tmp_path, capsys):
        path = tmp_path / "props.json"
        path.write_text("{not json")
        with pytest.raises(SystemExit):
            load_props_file(str(path))
        assert "Invalid JSON" in capsys.readouterr().err

    def test_normalizes(self, tmp_path):
        path = tmp_path / "props.json"
        path.write_text(json.dumps({"Frame": ["Size", "Size", 1]}))
        assert load_props_file(str(path)) == {"Frame": ["Size"]}


class TestMain:
    @pytest.fixture(autouse=True)
    def _no_logging_setup(self, monkeypatch):
        monkeypatch.setattr("luau_props_lsp.__main__.setup_colored_logging", lambda level: None)

    def test_complete_subcommand(self, luau_file, monkeypatch, capsys):
        monkeypatch.setattr(
            sys, "argv", ["luau-props-lsp", "complete", str(luau_file), "--line", "4", "--column", "1"]
        )
        main()
        assert "Size\tFrame property (React Luau helper)" in capsys.readouterr().out

    def test_subcommand_required(self, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["luau-props-lsp"])
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 2
