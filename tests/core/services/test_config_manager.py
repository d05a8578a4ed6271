"""
test_config_manager.py
----------------------
Tests for load_config: formats, merging, fallbacks and search paths.
"""

import json

import pytest
from unittest.mock import patch

from reaction_machine.core.services import config_manager
from reaction_machine.core.services.config_manager import load_config


DEFAULTS = {"timing": {"max_games": 3, "result_duration": 500}, "name": "cabinet"}


def test_json_merges_recursively(tmp_path):
    path = tmp_path / "c.json"
    path.write_text(json.dumps({"timing": {"max_games": 4}}))

    config = load_config(str(path), DEFAULTS)

    assert config == {"timing": {"max_games": 4, "result_duration": 500}, "name": "cabinet"}
    assert DEFAULTS["timing"]["max_games"] == 3


def test_yaml_and_notes_are_skipped(tmp_path):
    path = tmp_path / "c.yml"
    path.write_text("_notes: ignore me\nname: lobby\n")

    config = load_config(str(path), DEFAULTS)

    assert config["name"] == "lobby"
    assert "_notes" not in config


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")

    assert load_config(str(path), DEFAULTS) == DEFAULTS


def test_malformed_json_warns_and_falls_back(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json")

    with patch.object(config_manager, "DebugLogger") as mock_logger:
        config = load_config(str(path), DEFAULTS)

    assert config == DEFAULTS
    mock_logger.warn.assert_called_once()


def test_non_mapping_top_level_falls_back(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")

    assert load_config(str(path), DEFAULTS) == DEFAULTS


def test_strict_raises_on_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.json"), strict=True)


def test_relative_name_found_in_search_dirs(tmp_path, monkeypatch):
    (tmp_path / "machine.json").write_text(json.dumps({"name": "found"}))
    monkeypatch.setattr(config_manager, "SEARCH_DIRS", [str(tmp_path)])
    monkeypatch.chdir(tmp_path.parent)

    assert load_config("machine.json")["name"] == "found"
