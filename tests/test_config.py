"""Tests for JSON configuration."""
import sys
import os
import json
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from unittest.mock import patch

import pytest

from stackwork import config as config_module
from stackwork.config import Config, DEFAULT_CONFIG


def test_defaults_when_missing(tmp_path):
    config = Config(tmp_path / "missing.json")
    assert config.debug_logging is False
    assert config.stack_capacity is None


def test_save_and_reload(tmp_path):
    path = tmp_path / "sub" / "config.json"
    config = Config(path)
    config.stack_capacity = 4
    config.debug_logging = True
    reloaded = Config(path)
    assert reloaded.stack_capacity == 4
    assert reloaded.debug_logging is True
    assert json.loads(path.read_text())["stack_capacity"] == 4


def test_invalid_json_falls_back(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    config = Config(path)
    assert config.get("stack_capacity") == DEFAULT_CONFIG["stack_capacity"]


def test_invalid_capacity_is_unbounded(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"stack_capacity": -3}))
    assert Config(path).stack_capacity is None
    path.write_text(json.dumps({"stack_capacity": "ten"}))
    assert Config(path).stack_capacity is None


def test_default_path(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"debug_logging": True}))
    with patch.object(config_module, "CONFIG_FILE", path):
        assert Config().debug_logging is True


def test_non_object_json_falls_back(tmp_path):
    path = tmp_path / "config.json"
    for text in ("null", "5", "[1, 2]"):
        path.write_text(text)
        config = Config(path)
        assert config.stack_capacity is None
        assert config.debug_logging is False


def test_capacity_setter_rejects_invalid(tmp_path):
    path = tmp_path / "config.json"
    config = Config(path)
    for bad in (-1, "ten", True, 2.5):
        with pytest.raises(ValueError):
            config.stack_capacity = bad
    assert not path.exists()
    config.stack_capacity = 0
    assert Config(path).stack_capacity == 0
    config.stack_capacity = None
    assert Config(path).stack_capacity is None
