import json

import pytest

from spellcount.config import load_settings, settings_from_dict
from spellcount.models.settings import MagicCountSettings
from spellcount.validation import ConfigurationError


def test_defaults_without_file():
    s = load_settings()
    assert s == MagicCountSettings()
    assert (s.start_id, s.skill_type_base, s.spell_type_count) == (10, 1, 3)
    assert (s.spells_per_level, s.max_level) == (3, 7)
    assert (s.minimum_count, s.max_count, s.base_stat_id) == (3, 9, 4)
    assert s.base_stat_name == "mat"
    assert s.family_span == 22


def test_yaml_with_camel_case_keys(tmp_path):
    p = tmp_path / "settings.yaml"
    p.write_text("startId: 100\nmaxLevel: 9\nspellsPerLevel: 2\ncoefficient: 4.5\n", encoding="utf-8")
    s = load_settings(p)
    assert s.start_id == 100 and s.max_level == 9 and s.spells_per_level == 2
    assert s.coefficient == 4.5


def test_json_via_env(tmp_path, monkeypatch):
    p = tmp_path / "settings.json"
    p.write_text(json.dumps({"max_count": 20, "bias": -2}), encoding="utf-8")
    monkeypatch.setenv("SPELLCOUNT_CONFIG", str(p))
    s = load_settings()
    assert s.max_count == 20 and s.bias == -2


def test_explicit_path_beats_env(tmp_path, monkeypatch):
    env_file = tmp_path / "env.json"
    env_file.write_text('{"max_count": 20}', encoding="utf-8")
    arg_file = tmp_path / "arg.json"
    arg_file.write_text('{"max_count": 30}', encoding="utf-8")
    monkeypatch.setenv("SPELLCOUNT_CONFIG", str(env_file))
    assert load_settings(arg_file).max_count == 30


@pytest.mark.parametrize(
    "data",
    [
        {"maxLevel": 12},
        {"spellsPerLevel": 0},
        {"baseStatId": 8},
        {"bias": 11},
        {"nonsense": 1},
    ],
)
def test_out_of_range_rejected(data):
    with pytest.raises(ConfigurationError):
        settings_from_dict(data)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigurationError):
        load_settings(tmp_path / "nope.yaml")


def test_non_mapping_file(tmp_path):
    p = tmp_path / "list.yaml"
    p.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_settings(p)


def test_settings_are_frozen():
    s = MagicCountSettings()
    with pytest.raises(Exception):
        s.max_level = 5
