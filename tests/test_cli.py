# tests/test_cli.py

from __future__ import annotations

import json

from typer.testing import CliRunner

from gedcom_lineage.cli.app import app
from gedcom_lineage.utils import mock_file_path

runner = CliRunner()
FAMILY = str(mock_file_path("family.ged"))


def test_stats_command():
    result = runner.invoke(app, ["stats", FAMILY])
    assert result.exit_code == 0, result.output
    assert "Individuals" in result.output
    assert "11" in result.output
    assert "Root: @I1@" in result.output


def test_stats_descendants_scope():
    result = runner.invoke(app, ["stats", FAMILY, "--strategy", "descendants", "--root", "@I4@"])
    assert result.exit_code == 0, result.output
    assert "Root: @I4@" in result.output


def test_stats_rejects_unknown_strategy():
    result = runner.invoke(app, ["stats", FAMILY, "--strategy", "bogus"])
    assert result.exit_code != 0


def test_missing_file_fails_cleanly():
    result = runner.invoke(app, ["stats", "missing.ged"])
    assert result.exit_code == 1
    assert "file not found" in result.output


def test_roots_command():
    result = runner.invoke(app, ["roots", FAMILY, "--exclude-private"])
    assert result.exit_code == 0, result.output
    assert "Ahmad Saeed (1950)" in result.output
    assert "PRIVATE" not in result.output
    assert "Default root: @I1@ Omar Saeed" in result.output


def test_person_command():
    result = runner.invoke(app, ["person", FAMILY, "@I9@"])
    assert result.exit_code == 0, result.output
    assert "Yusuf" in result.output
    assert "Ahmad" in result.output
    assert "01/01/1980" in result.output


def test_person_command_unknown_id():
    result = runner.invoke(app, ["person", FAMILY, "@NOPE@"])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_search_command():
    result = runner.invoke(app, ["search", FAMILY, "saeed ahmad"])
    assert result.exit_code == 0, result.output
    assert "1 result(s)" in result.output
    assert "@I4@" in result.output

    empty = runner.invoke(app, ["search", FAMILY, "nobody"])
    assert "No results" in empty.output


def test_tree_command_to_file(tmp_path):
    out = tmp_path / "tree.json"
    result = runner.invoke(app, ["tree", FAMILY, "--max-depth", "1", "--out", str(out)])
    assert result.exit_code == 0, result.output

    payload = json.loads(out.read_text(encoding="utf-8"))
    assert payload["root"] == "@I1@"
    assert [n["id"] for n in payload["nodes"]] == ["@I1@", "@I5@", "@I4@", "@I6@"]
    assert len(payload["edges"]) == 3


def test_tree_command_missing_file():
    result = runner.invoke(app, ["tree", "missing.ged"])
    assert result.exit_code == 1
    assert "Failed to load" in result.output


def test_export_command(tmp_path):
    out = tmp_path / "export.json"
    result = runner.invoke(app, ["export", FAMILY, "--out", str(out), "--exclude-private"])
    assert result.exit_code == 0, result.output

    payload = json.loads(out.read_text(encoding="utf-8"))
    assert payload["default_root"] == "@I1@"
    assert "@I7@" not in payload["visible"]
    assert payload["counts"]["individuals"] == 11
