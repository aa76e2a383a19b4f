"""Tests for runtime config loading."""

import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from config.config_loader import DEFAULT_CONFIG, load_config, validate_config


def write_config(tmp_path, data):
    path = tmp_path / "runtime_config.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestLoadConfig:

    def test_bundled_config_matches_defaults(self):
        assert load_config() == DEFAULT_CONFIG

    def test_partial_override(self, tmp_path):
        config = load_config(write_config(tmp_path, {"show_trace": False}))
        assert config["show_trace"] is False
        assert config["log_file_prefix"] == DEFAULT_CONFIG["log_file_prefix"]

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.json")

    def test_unknown_key(self, tmp_path):
        with pytest.raises(ValueError, match="Unknown configuration key"):
            load_config(write_config(tmp_path, {"max_steps": 10}))

    def test_wrong_type(self, tmp_path):
        with pytest.raises(TypeError):
            load_config(write_config(tmp_path, {"enable_run_log": "yes"}))

    def test_not_an_object(self, tmp_path):
        with pytest.raises(TypeError):
            load_config(write_config(tmp_path, ["show_trace"]))

    def test_print_config(self, tmp_path, capsys):
        load_config(write_config(tmp_path, {"print_config": True}))
        assert "Loaded config" in capsys.readouterr().out


class TestValidateConfig:

    def test_missing_key(self):
        config = DEFAULT_CONFIG.copy()
        del config["show_trace"]
        with pytest.raises(ValueError, match="Missing required"):
            validate_config(config)

    def test_empty_prefix(self):
        config = dict(DEFAULT_CONFIG, log_file_prefix="")
        with pytest.raises(ValueError):
            validate_config(config)
