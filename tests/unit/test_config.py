"""Unit tests for config.py"""

import pytest
from pydantic import ValidationError

from strdiff.config import load_config


def test_load_config_defaults():
    """Settings defaults apply when no config.yaml, env var, or override exists."""
    settings = load_config()
    assert settings.context_lines == 3
    assert settings.old_label is None
    assert settings.compat is False


def test_load_config_reads_config_yaml(tmp_path):
    (tmp_path / "config.yaml").write_text("context_lines: 5\nold_label: before\n")
    settings = load_config()
    assert settings.context_lines == 5
    assert settings.old_label == "before"


def test_load_config_env_overrides_config_yaml(tmp_path, monkeypatch):
    """STRDIFF_CONTEXT_LINES takes precedence over config.yaml."""
    (tmp_path / "config.yaml").write_text("context_lines: 5\n")
    monkeypatch.setenv("STRDIFF_CONTEXT_LINES", "1")
    assert load_config().context_lines == 1


def test_load_config_cli_overrides_env(monkeypatch):
    """A non-None CLI override beats the env var; None overrides are ignored."""
    monkeypatch.setenv("STRDIFF_CONTEXT_LINES", "1")
    settings = load_config(overrides={"context_lines": 0, "new_label": None})
    assert settings.context_lines == 0
    assert settings.new_label is None


def test_load_config_env_compat(monkeypatch):
    monkeypatch.setenv("STRDIFF_COMPAT", "true")
    assert load_config().compat is True


def test_load_config_invalid_yaml(tmp_path):
    """load_config raises ValueError when config.yaml contains invalid YAML."""
    (tmp_path / "config.yaml").write_text("key: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid config.yaml"):
        load_config()


def test_load_config_rejects_negative_context():
    with pytest.raises(ValidationError):
        load_config(overrides={"context_lines": -1})
