# tests/test_config.py
import json

import pytest

from autosuggest.utils.config_manager import DEFAULTS, Config


def test_creates_file_with_defaults(tmp_path):
    p = tmp_path / "config.json"
    cfg = Config(str(p))
    assert cfg.as_dict() == DEFAULTS
    assert json.loads(p.read_text(encoding="utf8")) == DEFAULTS


def test_loads_existing_and_ignores_unknown_keys(tmp_path):
    p = tmp_path / "config.json"
    p.write_text(json.dumps({"max_suggestions": 8, "theme": "dark"}), encoding="utf8")
    cfg = Config(str(p))
    assert cfg.get("max_suggestions") == 8
    assert "theme" not in cfg.as_dict()


def test_broken_json_keeps_defaults(tmp_path, log_to_tmp):
    p = tmp_path / "config.json"
    p.write_text("{not json", encoding="utf8")
    cfg = Config(str(p))
    assert cfg.as_dict() == DEFAULTS
    assert "could not read" in log_to_tmp.read_text(encoding="utf-8")


def test_set_coerces_and_saves(tmp_path):
    p = tmp_path / "config.json"
    cfg = Config(str(p))
    cfg.set("max_suggestions", "7")
    cfg.set("log_echo", "yes")
    assert cfg.get("max_suggestions") == 7
    assert cfg.get("log_echo") is True
    assert Config(str(p)).get("max_suggestions") == 7


def test_set_without_persist(tmp_path):
    p = tmp_path / "config.json"
    cfg = Config(str(p))
    cfg.set("rank_by", "alphabetical", persist=False)
    assert cfg.get("rank_by") == "alphabetical"
    assert Config(str(p)).get("rank_by") == "frequency"


def test_set_errors(tmp_path):
    cfg = Config(str(tmp_path / "config.json"))
    with pytest.raises(KeyError):
        cfg.set("theme", "dark")
    with pytest.raises(ValueError):
        cfg.set("max_suggestions", "many")
    with pytest.raises(ValueError):
        cfg.set("log_echo", "maybe")


def test_persisted_set_keeps_session_overrides_off_disk(tmp_path):
    p = tmp_path / "config.json"
    p.write_text(json.dumps({"activity_limit": 20}), encoding="utf8")
    cfg = Config(str(p))
    cfg.set("max_suggestions", 9, persist=False)
    cfg.set("log_echo", True, persist=False)
    cfg.set("rank_by", "alphabetical")
    saved = json.loads(p.read_text(encoding="utf8"))
    assert saved["rank_by"] == "alphabetical"
    assert saved["activity_limit"] == 20
    assert saved["max_suggestions"] == 5
    assert saved["log_echo"] is False
    assert cfg.get("max_suggestions") == 9
