# tests/test_pipeline.py

from __future__ import annotations

import pytest

from gedcom_lineage.config import get_config
from gedcom_lineage.core import PipelineError, SourceLoadError, TreeContext
from gedcom_lineage.core.pipeline import Pipeline
from gedcom_lineage.loader import load_source
from gedcom_lineage.logging import get_logger
from gedcom_lineage.utils import mock_file_path


def _context(**kwargs) -> TreeContext:
    return TreeContext(config=get_config(), logger=get_logger("tests.pipeline"), **kwargs)


def test_missing_source_is_reported_not_raised(tmp_path):
    ctx = _context(input_path=str(tmp_path / "missing.ged"))

    snapshot = Pipeline(ctx).run()

    assert snapshot is None
    assert ctx.failed
    assert ctx.errors[0].startswith("Failed to load")


def test_load_source_errors(tmp_path):
    with pytest.raises(SourceLoadError):
        load_source(tmp_path / "missing.ged")
    with pytest.raises(SourceLoadError):
        load_source(tmp_path)


def test_pipeline_on_mock_file():
    ctx = _context(input_path=str(mock_file_path("family.ged")), max_depth=8)

    snapshot = Pipeline(ctx).run()

    assert not ctx.failed
    assert snapshot.root.id == "@I1@"
    assert len(snapshot.candidates) == 11
    assert snapshot.view.node_ids()[0] == "@I1@"
    assert set(snapshot.layout.positions) == set(snapshot.view.node_ids())
    assert ctx.stats == {
        "individuals": 11,
        "families": 4,
        "root": "@I1@",
        "visible": 9,
        "nodes": 5,
    }


def test_pipeline_with_forced_root_and_privacy():
    text = mock_file_path("family.ged").read_text(encoding="utf-8")
    ctx = _context(forced_root_id="@I4@", exclude_private=True, highlight_id="@I9@")

    snapshot = Pipeline(ctx).run(text)

    assert snapshot.root.id == "@I4@"
    assert snapshot.visible == {"@I4@", "@I8@", "@I9@"}
    assert len(snapshot.candidates) == 10
    assert snapshot.view.find_node_for("@I9@").highlight == "selected"


def test_pipeline_on_empty_text():
    ctx = _context()
    snapshot = Pipeline(ctx).run("")

    assert snapshot.root is None
    assert snapshot.view is None
    assert ctx.stats["individuals"] == 0
    assert ctx.stats["nodes"] == 0


def test_unexpected_failure_is_wrapped(monkeypatch):
    import gedcom_lineage.core.pipeline as pipeline_module

    def boom(text):
        raise RuntimeError("bad input")

    monkeypatch.setattr(pipeline_module, "parse_gedcom", boom)

    with pytest.raises(PipelineError, match="bad input"):
        Pipeline(_context()).run("0 HEAD")
