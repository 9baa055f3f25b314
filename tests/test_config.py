# tests/test_config.py

from __future__ import annotations

import logging

from gedcom_lineage.config import (
    CONFIG_ENV_VAR,
    DEFAULT_LAYOUT,
    DEFAULT_TREE,
    GLConfig,
    config_path,
    load_config,
)
from gedcom_lineage.logging import LogSettings, configure_logging, get_logger, list_active_loggers


def test_defaults_for_empty_config():
    cfg = GLConfig({})
    assert cfg.layout == DEFAULT_LAYOUT
    assert cfg.tree == DEFAULT_TREE
    assert cfg.debug is False
    assert cfg.paths == {}


def test_partial_sections_merge_with_defaults():
    cfg = GLConfig({"layout": {"node_width": 200}, "tree": None})
    assert cfg.layout["node_width"] == 200
    assert cfg.layout["horizontal_gap"] == 30
    assert cfg.tree == DEFAULT_TREE


def test_env_var_overrides_config_path(tmp_path, monkeypatch):
    path = tmp_path / "custom.yml"
    path.write_text("debug: true\nlayout:\n  vertical_gap: 10\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    assert config_path() == path
    cfg = load_config()
    assert cfg.debug is True
    assert cfg.layout["vertical_gap"] == 10


def test_missing_config_file_uses_defaults(tmp_path, monkeypatch):
    monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "nope.yml"))
    assert load_config().layout == DEFAULT_LAYOUT


def test_project_config_loads(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    cfg = load_config()
    assert cfg.tree["max_depth"] == 8
    assert cfg.layout["spouse_width"] == 160


def test_short_logger_names_are_nested():
    log = get_logger("tests.config")
    assert log.name == "gedcom_lineage.tests.config"
    assert get_logger("gedcom_lineage.graph").name == "gedcom_lineage.graph"
    assert "gedcom_lineage.tests.config" in list_active_loggers()


def test_log_settings_from_config(tmp_path):
    cfg = GLConfig({"logging": {"level": "error", "to_file": True, "dir": str(tmp_path)}})
    settings = LogSettings.from_config(cfg)
    assert settings.level == logging.ERROR
    assert settings.to_file is True
    assert settings.log_dir == tmp_path
    assert settings.console_level == logging.WARNING

    debug = LogSettings.from_config(GLConfig({"debug": True, "logging": {"level": "bogus"}}))
    assert debug.level == logging.DEBUG
    assert debug.console_level == logging.DEBUG

    assert LogSettings.from_config(GLConfig({"logging": {"level": "bogus"}})).level == logging.INFO


def test_file_logging_writes_master_and_module_logs(tmp_path):
    settings = LogSettings(to_file=True, per_module=True, log_dir=tmp_path, master_file="run.log")
    try:
        configure_logging(settings)
        get_logger("tests.files").info("hello %s", "file")

        assert "hello file" in (tmp_path / "run.log").read_text(encoding="utf-8")
        assert "hello file" in (tmp_path / "gedcom_lineage_tests_files.log").read_text(encoding="utf-8")
    finally:
        configure_logging()
