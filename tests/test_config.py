"""Tests for configuration loading."""

import logging
from pathlib import Path

import pytest

from rubric_parser.config import AppConfig, ConfigLoader, RenderSettings


def test_defaults_without_file():
    config = ConfigLoader().load()

    assert config == AppConfig()
    assert config.logging.numeric_level == logging.WARNING
    assert config.render.empty_cell == "-"


def test_load_yaml(tmp_path):
    (tmp_path / "config.yml").write_text(
        "logging:\n"
        "  level: debug\n"
        "  file: logs/parser.log\n"
        "render:\n"
        "  empty_cell: 'n/a'\n"
        "  show_declared_total: false\n",
        encoding="utf-8",
    )

    config = ConfigLoader(tmp_path).load("config.yml")

    assert config.logging.numeric_level == logging.DEBUG
    assert config.logging.file == Path("logs/parser.log")
    assert config.render == RenderSettings(empty_cell="n/a", show_declared_total=False)


def test_empty_file_uses_defaults(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")

    assert ConfigLoader().load(path) == AppConfig()


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConfigLoader(tmp_path).load("missing.yml")


def test_unknown_log_level(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("logging:\n  level: chatty\n", encoding="utf-8")

    with pytest.raises(ValueError, match="chatty"):
        ConfigLoader().load(path)


@pytest.mark.parametrize("content", ["- a\n- b\n", "render: [1, 2]\n"])
def test_malformed_config(tmp_path, content):
    path = tmp_path / "config.yml"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ValueError):
        ConfigLoader().load(path)
