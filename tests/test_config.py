"""Tests for config loading and validation."""

import os
import tempfile

import pytest
import yaml
from pydantic import ValidationError

from durationkit.config import DurationConfig, FormatConfig, load_config


def test_default_config():
    config = DurationConfig()
    assert config.format.short is True
    assert config.format.units == ["y", "mo", "w", "d", "h", "m", "s"]
    assert config.parse.strict is False


def test_load_config_from_yaml():
    data = {
        "format": {"short": False, "units": ["h", "minutes"]},
    }
    with tempfile.NamedTemporaryFile(
        mode="w", suffix=".yaml", delete=False, encoding="utf-8"
    ) as f:
        yaml.dump(data, f)
        f.flush()
        config = load_config(f.name)

    os.unlink(f.name)
    assert config.format.short is False
    assert config.format.units == ["h", "minutes"]
    # Defaults preserved for unset sections
    assert config.parse.strict is False


def test_load_config_missing_file():
    config = load_config("/nonexistent/path.yaml")
    assert config == DurationConfig()


def test_load_config_empty_yaml():
    with tempfile.NamedTemporaryFile(
        mode="w", suffix=".yaml", delete=False, encoding="utf-8"
    ) as f:
        f.write("")
        f.flush()
        config = load_config(f.name)

    os.unlink(f.name)
    assert config == DurationConfig()


def test_unknown_unit_in_config_rejected():
    with pytest.raises(ValidationError):
        FormatConfig(units=["h", "fortnight"])


def test_find_config_in_parent_dir(tmp_path, monkeypatch):
    (tmp_path / "duration_config.yaml").write_text(
        "parse:\n  strict: true\n", encoding="utf-8"
    )
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    monkeypatch.chdir(nested)

    config = load_config()
    assert config.parse.strict is True
