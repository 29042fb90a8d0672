# tests/test_config_manager.py
import json
import logging

import pytest
from rich.console import Console

from suggestion_builder.utils.config_manager import Config, ConfigError


def test_defaults_in_memory():
    cfg = Config()
    assert cfg.path is None
    assert cfg.as_build_kwargs() == {
        "stop_words": [],
        "max_combined_words": 3,
        "max_word_to_ignore_length": 1,
    }
    assert cfg.get("keyword") == ""


def test_defaults_are_not_shared():
    a, b = Config(), Config()
    a.data["stop_words"].append("x")
    assert b.get("stop_words") == []


def test_load_merges_file(tmp_path):
    p = tmp_path / "cfg.json"
    p.write_text(json.dumps({"stop_words": ["is", "the"], "max_combined_words": 5}), encoding="utf8")
    cfg = Config(str(p))
    assert cfg.get("stop_words") == ["is", "the"]
    assert cfg.get("max_combined_words") == 5
    assert cfg.get("max_word_to_ignore_length") == 1


def test_missing_file_keeps_defaults_and_is_not_created(tmp_path):
    p = tmp_path / "nope.json"
    cfg = Config(str(p))
    assert cfg.get("max_combined_words") == 3
    assert not p.exists()


def test_corrupt_file_logs_warning(tmp_path, caplog):
    p = tmp_path / "bad.json"
    p.write_text("{not json", encoding="utf8")
    with caplog.at_level(logging.WARNING):
        cfg = Config(str(p))
    assert cfg.get("max_combined_words") == 3
    assert "unreadable" in caplog.text


def test_unknown_key_in_file_is_ignored(tmp_path, caplog):
    p = tmp_path / "cfg.json"
    p.write_text(json.dumps({"theme": "dark", "keyword": "gum"}), encoding="utf8")
    with caplog.at_level(logging.WARNING):
        cfg = Config(str(p))
    assert "theme" not in cfg.data
    assert cfg.get("keyword") == "gum"
    assert "theme" in caplog.text


def test_bad_value_in_file_raises(tmp_path):
    p = tmp_path / "cfg.json"
    p.write_text(json.dumps({"max_combined_words": "lots"}), encoding="utf8")
    with pytest.raises(ConfigError):
        Config(str(p))


def test_set_coerces_types():
    cfg = Config()
    cfg.set("max_combined_words", "4")
    cfg.set("stop_words", "is, a ,the,")
    cfg.set("keyword", "girl")
    assert cfg.get("max_combined_words") == 4
    assert cfg.get("stop_words") == ["is", "a", "the"]
    assert cfg.get("keyword") == "girl"


def test_set_unknown_key_raises():
    with pytest.raises(ConfigError):
        Config().set("balance", 0.5)


def test_set_bad_int_raises():
    cfg = Config()
    with pytest.raises(ConfigError):
        cfg.set("max_word_to_ignore_length", "x")
    assert cfg.get("max_word_to_ignore_length") == 1


def test_save_and_reload(tmp_path):
    p = tmp_path / "cfg.json"
    cfg = Config(str(p))
    cfg.set("stop_words", ["a", "the"])
    cfg.set("max_combined_words", 2)
    cfg.save()
    again = Config(str(p))
    assert again.data == cfg.data


def test_save_without_path_is_noop(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    Config().save()
    assert list(tmp_path.iterdir()) == []


def test_show_renders_table():
    out = Console(record=True, width=100)
    cfg = Config()
    cfg.set("stop_words", "is,the")
    cfg.show(out)
    text = out.export_text()
    assert "max_combined_words" in text
    assert "is, the" in text


def test_null_in_file_falls_back_to_default(tmp_path):
    p = tmp_path / "cfg.json"
    p.write_text(json.dumps({"keyword": None, "max_combined_words": None, "stop_words": None}), encoding="utf8")
    cfg = Config(str(p))
    assert cfg.get("keyword") == ""
    assert cfg.get("max_combined_words") == 3
    assert cfg.get("stop_words") == []


@pytest.mark.parametrize("value", [5, ["girl"], True])
def test_non_string_keyword_raises(tmp_path, value):
    p = tmp_path / "cfg.json"
    p.write_text(json.dumps({"keyword": value}), encoding="utf8")
    with pytest.raises(ConfigError):
        Config(str(p))
